"""Towers of disks: move a stack between pegs, never a larger disk on a smaller one.

A state is a tuple of pegs; each peg is a tuple of disk sizes listed top
first, so ``((1, 2), (), ())`` has disk 1 on disk 2 on the left peg.
"""

from statesearch.rules.registry import RuleSetRegistry

Peg = tuple[int, ...]
HanoiState = tuple[Peg, ...]

PEG_NAMES = ("left", "middle", "right")


def initial_state(num_disks: int, num_pegs: int = 3) -> HanoiState:
    """All disks stacked on the first peg."""
    return (tuple(range(1, num_disks + 1)),) + ((),) * (num_pegs - 1)


def target_state(num_disks: int, num_pegs: int = 3) -> HanoiState:
    """All disks stacked on the last peg."""
    return ((),) * (num_pegs - 1) + (tuple(range(1, num_disks + 1)),)


def can_move(state: HanoiState, src: int, dst: int) -> bool:
    """Whether the top disk of ``src`` may be placed on ``dst``."""
    if src == dst or not state[src]:
        return False
    return not state[dst] or state[src][0] < state[dst][0]


def move(state: HanoiState, src: int, dst: int) -> HanoiState:
    """Return the state after moving the top disk of ``src`` onto ``dst``."""
    pegs = list(state)
    disk = pegs[src][0]
    pegs[src] = pegs[src][1:]
    pegs[dst] = (disk,) + pegs[dst]
    return tuple(pegs)


def is_legal(state: HanoiState) -> bool:
    """Whether every peg is sorted small-on-top and no disk appears twice."""
    disks = [d for peg in state for d in peg]
    if len(disks) != len(set(disks)):
        return False
    return all(list(peg) == sorted(peg) for peg in state)


def peg_name(index: int, num_pegs: int) -> str:
    if num_pegs == len(PEG_NAMES):
        return PEG_NAMES[index]
    return f"peg{index}"


def build_ruleset(registry: RuleSetRegistry, name: str = "hanoi", num_pegs: int = 3) -> str:
    """Create a ruleset with one move rule per ordered pair of pegs.

    Rules are registered source-major: left->middle, left->right,
    middle->left, middle->right, right->left, right->middle.

    Args:
        registry: Registry to create the ruleset in.
        name: Ruleset name.
        num_pegs: Number of pegs.

    Returns:
        The ruleset name.
    """
    registry.create_ruleset(name)
    for src in range(num_pegs):
        for dst in range(num_pegs):
            if src == dst:
                continue
            registry.register_rule(
                name,
                f"{peg_name(src, num_pegs)}->{peg_name(dst, num_pegs)}",
                lambda s, src=src, dst=dst: can_move(s, src, dst),
                lambda s, src=src, dst=dst: move(s, src, dst),
            )
    return name


def misplaced_disks(state: HanoiState, cost: int) -> float:
    """Path cost plus the number of disks not on the last peg."""
    return cost + sum(len(peg) for peg in state[:-1])


def format_state(state: HanoiState) -> str:
    return " | ".join(" ".join(str(d) for d in peg) or "-" for peg in state)
