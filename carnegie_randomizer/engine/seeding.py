from __future__ import annotations

import random

from .types import SetupConfigError

BUILDING_SALT = 0
CARD_SALT = 0x4362256E

SEED_LIMIT = 1 << 64
SEED_MODULUS = 100_000_000
SEED_DIGITS = 8


def check_seed(seed: int) -> int:
    """Validate a raw unsigned 64-bit seed."""
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise SetupConfigError(f"Seed must be an integer, got {seed!r}.")
    if seed < 0:
        raise SetupConfigError(f"Seed must not be negative, got {seed}.")
    if seed >= SEED_LIMIT:
        raise SetupConfigError(f"Seed must fit in 64 bits, got {seed}.")
    return seed


def normalize_seed(seed: int) -> int:
    """Reduce a seed into the shareable 8-digit range."""
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise SetupConfigError(f"Seed must be an integer, got {seed!r}.")
    if seed < 0:
        raise SetupConfigError(f"Seed must not be negative, got {seed}.")
    return seed % SEED_MODULUS


def parse_seed(text: str) -> int:
    """Parse a user supplied decimal seed, e.g. from a shared link fragment."""
    cleaned = str(text).strip().lstrip("#")
    if not (cleaned.isascii() and cleaned.isdigit()):
        raise SetupConfigError(f"Seed must be a non-negative decimal number, got {text!r}.")
    return normalize_seed(int(cleaned))


def format_seed(seed: int) -> str:
    return f"{normalize_seed(seed):0{SEED_DIGITS}d}"


def random_seed(rng: random.Random | None = None) -> int:
    source = rng if rng is not None else random.SystemRandom()
    return source.getrandbits(32) % SEED_MODULUS
