"""
Process-wide random source.

Generation code takes its random source as an argument; this module only
supplies the default one so scripts and the settings-driven world builder
share a single seeded stream.
"""

from typing import Optional

from ..core.alea_prng import AleaPRNG

# Global PRNG instance
_prng: Optional[AleaPRNG] = None


def set_random_seed(seed: str) -> AleaPRNG:
    """
    Reseed the shared Alea PRNG.

    Args:
        seed: Seed string to use

    Returns:
        The freshly seeded PRNG
    """
    global _prng
    _prng = AleaPRNG(seed)
    return _prng


def get_prng() -> AleaPRNG:
    """Get the shared PRNG, seeding it with "default" on first use."""
    global _prng
    if _prng is None:
        _prng = AleaPRNG("default")
    return _prng
