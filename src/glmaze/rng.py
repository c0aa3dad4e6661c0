# src/glmaze/rng.py
# Seeded PCG32 source. Every generator draws from this, never from `random`,
# so a seed string maps to the same maze on every platform and Python version.

import hashlib
from dataclasses import dataclass
from typing import List, MutableSequence, Sequence, Tuple, TypeVar

T = TypeVar("T")

MULT = 6364136223846793005
MASK64 = (1 << 64) - 1
MASK32 = (1 << 32) - 1
SEED_PERSON = b"glmaze-seed"

def pcg_step(state: int, inc: int) -> int:
    return (state * MULT + inc) & MASK64

def pcg_output(state: int) -> int:
    # XSH RR: xorshift high bits, then rotate by the top 5 bits
    xorshifted = (((state >> 18) ^ state) >> 27) & MASK32
    rot = state >> 59
    return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & MASK32

def expand_seed(seed: str) -> Tuple[int, int]:
    """
    Expand an arbitrary string into (initstate, initseq) for PCG32.
    Lone surrogates (undecodable argv bytes) are encoded as-is.
    BLAKE2b keeps the mapping stable across runs and platforms.
    """
    if not seed:
        raise ValueError("seed must be a non-empty string")
    digest = hashlib.blake2b(seed.encode("utf-8", "surrogatepass"), digest_size=16, person=SEED_PERSON).digest()
    return int.from_bytes(digest[:8], "big"), int.from_bytes(digest[8:], "big")

@dataclass
class PcgRandom:
    state: int
    inc: int

    @classmethod
    def from_seed(cls, seed: str) -> "PcgRandom":
        initstate, initseq = expand_seed(seed)
        return cls.from_state(initstate, initseq)

    @classmethod
    def from_state(cls, initstate: int, initseq: int) -> "PcgRandom":
        # Reference pcg32_srandom_r sequence.
        rng = cls(state=0, inc=((initseq << 1) | 1) & MASK64)
        rng.next32()
        rng.state = (rng.state + initstate) & MASK64
        rng.next32()
        return rng

    def next32(self) -> int:
        old = self.state
        self.state = pcg_step(old, self.inc)
        return pcg_output(old)

    def below(self, n: int) -> int:
        """Uniform integer in 0..n-1 (rejection sampling, no modulo bias)."""
        if not 0 < n <= MASK32 + 1:
            raise ValueError(f"bound out of range: {n}")
        threshold = ((MASK32 + 1) - n) % n
        while True:
            r = self.next32()
            if r >= threshold:
                return r % n

    def between(self, lo: int, hi: int) -> int:
        """Uniform integer in lo..hi inclusive."""
        if hi < lo:
            raise ValueError(f"empty range {lo}..{hi}")
        return lo + self.below(hi - lo + 1)

    def shuffle(self, items: MutableSequence[T]) -> None:
        # Fisher-Yates, high index down
        for i in range(len(items) - 1, 0, -1):
            j = self.below(i + 1)
            items[i], items[j] = items[j], items[i]

    def shuffled(self, items: Sequence[T]) -> List[T]:
        out = list(items)
        self.shuffle(out)
        return out
