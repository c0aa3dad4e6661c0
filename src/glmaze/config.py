# src/glmaze/config.py
# Generator selection, size limits and seed defaults. No files are read here;
# the surrounding game owns persisted settings and argument parsing.

import secrets
import string
from dataclasses import dataclass, replace
from enum import Enum


class GeneratorKind(Enum):
    DFS = "DFS"
    RD = "RD"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, name: str) -> "GeneratorKind":
        # The game treats anything that isn't "DFS" as recursive division.
        return cls.DFS if name.strip().upper() == "DFS" else cls.RD

    def __str__(self) -> str:
        return self.label


_LABELS = {
    GeneratorKind.DFS: "DFS (Depth first search)",
    GeneratorKind.RD: "RD (Recursive division)",
}

# Smallest sizes the algorithms accept. DFS needs a 3-cell margin around its
# seed cell; RD needs at least one chamber plus the border.
MIN_SIZE = {
    GeneratorKind.DFS: 7,
    GeneratorKind.RD: 5,
}

DEFAULT_KIND = GeneratorKind.RD
DEFAULT_SIZE = 20
MIN_CONFIG_SIZE = 10
MAX_CONFIG_SIZE = 100000
SEED_LENGTH = 30
SEED_ALPHABET = string.ascii_letters + string.digits


class MazeSizeError(ValueError):
    """Size too small for the selected generator."""


def random_seed(length: int = SEED_LENGTH) -> str:
    return "".join(secrets.choice(SEED_ALPHABET) for _ in range(length))


@dataclass(frozen=True)
class MazeConfig:
    kind: GeneratorKind = DEFAULT_KIND
    size: int = DEFAULT_SIZE
    seed: str = ""

    def resolved(self) -> "MazeConfig":
        """
        Apply the game's fallbacks: an out-of-range size becomes DEFAULT_SIZE
        and an empty seed is replaced by a fresh random one.
        """
        size = self.size
        if size < MIN_CONFIG_SIZE or size > MAX_CONFIG_SIZE:
            size = DEFAULT_SIZE
        seed = self.seed or random_seed()
        return replace(self, size=size, seed=seed)
