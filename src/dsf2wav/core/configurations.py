"""Registry of legal PCM output configurations for DSD-derived audio."""

from types import MappingProxyType
from typing import Iterator, Mapping, Tuple

# Sample rate -> legal (channels, bit depth) pairs, in display order
DEFAULT_CONFIGURATIONS: Mapping[int, Tuple[Tuple[int, int], ...]] = MappingProxyType({
    176400: ((2, 16), (2, 24), (2, 32), (6, 24), (8, 24)),
    352800: ((2, 24), (2, 32), (6, 24)),
    705600: ((2, 24), (2, 32), (6, 24)),
    1411200: ((2, 24), (2, 32), (6, 24)),
    2822400: ((2, 24), (2, 32), (6, 24)),
})


class ConfigurationTable:
    """
    Immutable table of legal (sample rate, channels, bit depth) triples.

    Built once and shared by reference; there is no way to mutate it
    after construction.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[int, Tuple[Tuple[int, int], ...]] = DEFAULT_CONFIGURATIONS):
        self._entries = MappingProxyType(
            {rate: tuple((int(ch), int(bits)) for ch, bits in pairs) for rate, pairs in entries.items()}
        )

    def is_valid(self, sample_rate: int, channels: int, bit_depth: int) -> bool:
        """Check whether the triple is a legal output configuration."""
        pairs = self._entries.get(sample_rate)
        if pairs is None:
            return False
        return (channels, bit_depth) in pairs

    def entries(self) -> Iterator[Tuple[int, int, int]]:
        """Yield (sample_rate, channels, bit_depth) triples in table order."""
        for rate, pairs in self._entries.items():
            for channels, bit_depth in pairs:
                yield rate, channels, bit_depth

    def sample_rates(self) -> Tuple[int, ...]:
        return tuple(self._entries)

    def __contains__(self, triple) -> bool:
        try:
            sample_rate, channels, bit_depth = triple
        except (TypeError, ValueError):
            return False
        return self.is_valid(sample_rate, channels, bit_depth)

    def __len__(self) -> int:
        return sum(len(pairs) for pairs in self._entries.values())


DEFAULT_TABLE = ConfigurationTable()


def is_valid_config(sample_rate: int, channels: int, bit_depth: int) -> bool:
    """Check a triple against the default table."""
    return DEFAULT_TABLE.is_valid(sample_rate, channels, bit_depth)
