"""
Injectable random source shared by every generator.

All sampling goes through a RandomSource so a fixed seed reproduces an entire
corpus. The Faker instance used for realistic strings is seeded from the same
underlying generator.
"""

import ipaddress
import random
import string

from faker import Faker

ALPHANUMERIC = string.ascii_lowercase + string.digits


class RandomSource:
    """
    Seedable wrapper around random.Random and Faker.

    Attributes:
        seed: Seed the source was created with (None = OS entropy)
        faker: Faker instance seeded from this source
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        """
        Initialize the random source.

        Args:
            seed: Random seed for reproducibility
            locale: Faker locale for realistic strings
        """
        self.seed = seed
        self.locale = locale
        self._rng = random.Random(seed)
        self.faker = Faker(locale)
        self.faker.seed_instance(self._rng.getrandbits(32))

    def derive(self, seed: int) -> "RandomSource":
        """Return an independent source seeded with ``seed``."""
        return RandomSource(seed, locale=self.locale)

    def random(self) -> float:
        return self._rng.random()

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        return self._rng.random() < probability

    def rand_int(self, min_value: int, max_value: int) -> int:
        """Uniform integer in [min_value, max_value]; inverted bounds are swapped."""
        if max_value < min_value:
            min_value, max_value = max_value, min_value
        return self._rng.randint(min_value, max_value)

    def rand_float(self, min_value: float, max_value: float, precision: int = 5) -> float:
        """Uniform float rounded to ``precision`` decimals and kept inside the bounds."""
        lo, hi = min(min_value, max_value), max(min_value, max_value)
        value = round(self._rng.uniform(lo, hi), precision)
        return min(max(value, lo), hi)

    def rand_string(self, length: int = 8, alphabet: str = ALPHANUMERIC) -> str:
        return "".join(self._rng.choice(alphabet) for _ in range(length))

    def digits(self, length: int) -> str:
        return "".join(self._rng.choice(string.digits) for _ in range(length))

    def choice(self, values):
        return self._rng.choice(values)

    def rand_ipv4(self) -> str:
        # First octet starts at 1; reserved ranges are not filtered
        return ".".join(
            str(octet)
            for octet in (
                self.rand_int(1, 255),
                self.rand_int(0, 255),
                self.rand_int(0, 255),
                self.rand_int(0, 255),
            )
        )

    def rand_ipv6(self) -> str:
        """Eight random 16-bit hextets, uncompressed."""
        return ":".join(f"{self.rand_int(0, 0xFFFF):x}" for _ in range(8))

    def rand_ip(self, version: str = "v4") -> str:
        if version == "v6":
            return self.rand_ipv6()
        return self.rand_ipv4()


def is_valid_ip(value: str) -> bool:
    """Return True if ``value`` parses as an IPv4 or IPv6 address."""
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True
