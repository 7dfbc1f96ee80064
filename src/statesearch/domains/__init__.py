"""Example problem domains used to exercise the search engine."""

from statesearch.domains import hanoi

__all__ = ["hanoi"]
