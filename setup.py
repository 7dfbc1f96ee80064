from setuptools import find_packages, setup

setup(
    name="statesearch",
    version="0.1.0-alpha",
    description="Statesearch - Best-first state-space search with incremental cost relaxation",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=["numpy", "matplotlib", "networkx", "tabulate", "tqdm"],
    extras_require={"test": ["pytest"]},
)
