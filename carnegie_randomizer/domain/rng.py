"""Seeded shuffling that reproduces the Rust ``rand``/``rand_pcg`` stack bit for bit.

Shared seeds are only portable between implementations that use the same
generator, so the whole chain is pinned here:

- ``Pcg64Mcg`` (128-bit multiplicative congruential state, XSL-RR output),
- seeded through the PCG32 expansion used by ``rand_core`` ``seed_from_u64``,
- indices drawn with the widening-multiply rejection sampler of ``rand`` 0.8,
- shuffled with the descending Fisher-Yates loop of ``SliceRandom::shuffle``.
"""

from __future__ import annotations

from typing import Iterable, List, TypeVar

T = TypeVar("T")

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1
MASK128 = (1 << 128) - 1

PCG32_MULTIPLIER = 6364136223846793005
PCG32_INCREMENT = 11634580027462260723
MCG128_MULTIPLIER = 0x2360_ED05_1FC6_5DA4_4385_DF64_9FCC_F645


def _rotate_right(value: int, rot: int, bits: int) -> int:
    mask = (1 << bits) - 1
    rot %= bits
    return ((value >> rot) | (value << (bits - rot))) & mask


def _leading_zeros(value: int, bits: int) -> int:
    return bits - value.bit_length()


def expand_seed(seed: int) -> bytes:
    """Stretch a 64-bit seed into the 16 seed bytes of ``Pcg64Mcg``."""
    state = seed & MASK64
    out = bytearray()
    for _ in range(4):
        # Advance first so low Hamming-weight seeds are moved away from.
        state = (state * PCG32_MULTIPLIER + PCG32_INCREMENT) & MASK64
        xorshifted = (((state >> 18) ^ state) >> 27) & MASK32
        out += _rotate_right(xorshifted, state >> 59, 32).to_bytes(4, "little")
    return bytes(out)


class Pcg64Mcg:
    """PCG XSL RR 128/64 (MCG variant)."""

    def __init__(self, state: int) -> None:
        self.state = (state | 1) & MASK128

    @classmethod
    def from_seed(cls, seed: bytes) -> "Pcg64Mcg":
        if len(seed) != 16:
            raise ValueError("Pcg64Mcg seeds are exactly 16 bytes.")
        return cls(int.from_bytes(seed, "little"))

    @classmethod
    def seed_from_u64(cls, seed: int) -> "Pcg64Mcg":
        return cls.from_seed(expand_seed(seed))

    def next_u64(self) -> int:
        self.state = (self.state * MCG128_MULTIPLIER) & MASK128
        rot = self.state >> 122
        xsl = ((self.state >> 64) ^ self.state) & MASK64
        return _rotate_right(xsl, rot, 64)

    def next_u32(self) -> int:
        return self.next_u64() & MASK32

    def gen_index(self, ubound: int) -> int:
        """Uniform integer in ``[0, ubound)``."""
        if ubound <= 0:
            raise ValueError("ubound must be positive.")
        if ubound <= MASK32:
            return self._sample_below(ubound, 32, self.next_u32)
        return self._sample_below(ubound, 64, self.next_u64)

    @staticmethod
    def _sample_below(bound: int, bits: int, draw) -> int:
        mask = (1 << bits) - 1
        zone = ((bound << _leading_zeros(bound, bits)) - 1) & mask
        while True:
            wide = draw() * bound
            if wide & mask <= zone:
                return wide >> bits


def shuffle(seed: int, salt: int, items: Iterable[T]) -> List[T]:
    """Return a permutation of ``items`` determined only by ``seed ^ salt``.

    The input is sorted first, so the caller's ordering has no effect.
    """
    ordered = sorted(items)
    rng = Pcg64Mcg.seed_from_u64((seed ^ salt) & MASK64)
    for i in range(len(ordered) - 1, 0, -1):
        j = rng.gen_index(i + 1)
        ordered[i], ordered[j] = ordered[j], ordered[i]
    return ordered
