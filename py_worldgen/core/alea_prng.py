"""
Seedable uniform [0, 1) source for terrain draws.

Johannes Baagøe's Alea generator. String seeds let a whole explored world be
reproduced from a single word, which plain integer seeds make awkward.
"""

_TWO_POW_32 = 0x100000000
_INV_TWO_POW_32 = 2.3283064365386963e-10


class _Mash:
    """Hashes seed material into fractions in [0, 1)."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data) -> float:
        n = self.n
        for char in str(data):
            n += ord(char)
            h = 0.02519603282416938 * n
            n = int(h) & 0xFFFFFFFF
            h -= n
            h *= n
            n = int(h) & 0xFFFFFFFF
            h -= n
            n += h * _TWO_POW_32
        self.n = n
        return (int(n) & 0xFFFFFFFF) * _INV_TWO_POW_32


class AleaPRNG:
    """
    Alea PRNG.

    Instances are callable so they can be handed straight to the terrain
    classifier as its random source.
    """

    def __init__(self, seed="default"):
        self.seed = seed
        self.call_count = 0

        mash = _Mash()
        self._state = [mash(" "), mash(" "), mash(" ")]
        self._carry = 1

        parts = list(seed) if isinstance(seed, (list, tuple)) else [seed]
        for part in parts:
            for i in range(3):
                self._state[i] -= mash(part)
                if self._state[i] < 0:
                    self._state[i] += 1

    def random(self) -> float:
        """Next value in [0, 1)."""
        self.call_count += 1
        s0, s1, s2 = self._state
        t = 2091639 * s0 + self._carry * _INV_TWO_POW_32
        self._carry = int(t)
        self._state = [s1, s2, t - self._carry]
        return self._state[2]

    __call__ = random

    def choice(self, seq):
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]
