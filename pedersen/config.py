"""Process-wide settings, read once from the environment.

Variables:
- PEDERSEN_DEFAULT_BITS: modulus size used by parameter generation (default 2048)
- PEDERSEN_MR_ROUNDS: Miller–Rabin witness count (default 100)
- PEDERSEN_BLINDING_BYTES: size of fresh blinding factors in bytes (default 32)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class Settings:
    default_bits: int = 2048
    miller_rabin_rounds: int = 100
    blinding_bytes: int = 32


_ENV_FIELDS = {
    "PEDERSEN_DEFAULT_BITS": "default_bits",
    "PEDERSEN_MR_ROUNDS": "miller_rabin_rounds",
    "PEDERSEN_BLINDING_BYTES": "blinding_bytes",
}


def _positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables, falling back to defaults."""
    env = os.environ if environ is None else environ
    overrides = {}
    for var, field_name in _ENV_FIELDS.items():
        raw = env.get(var)
        if raw is None or raw.strip() == "":
            continue
        overrides[field_name] = _positive_int(var, raw)
    return Settings(**overrides)


SETTINGS = load_settings()

__all__ = ["Settings", "SETTINGS", "load_settings"]
