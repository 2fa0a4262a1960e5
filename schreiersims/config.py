"""
In-process configuration of the stabilizer chain construction.

There are no configuration files or environment variables. A `Config` is
passed to `Group`, and its `Stats` count the work done.
"""

from dataclasses import dataclass, field


@dataclass
class Stats:
    products: int = 0
    inverses: int = 0
    schreier_gens: int = 0
    levels: int = 0


@dataclass
class Config:
    # Drop Schreier generators that compare equal to one already collected
    # for the same level. Without this every non-trivial Schreier generator
    # is passed down, which makes the chain grow much faster.
    dedupe_schreier_gens: bool = True

    stats: Stats = field(default_factory=lambda: Stats())
