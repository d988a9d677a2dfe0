"""Data models, constants and configuration classes."""

import sys
from array import array
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

DSF_HEADER_SIZE = 28
"""Size of the DSF preamble validated before raw data."""

DSD_TAG = b"DSD "
FMT_TAG = b"fmt "

DSD_BLOCK_SIZE = 4096
"""Bytes read from the DSD stream per block."""

DOP_MARKER = 0x05FA
"""Marker OR-ed into every sample when DoP framing is enabled."""

DOP_BIT_DEPTH = 24
"""Only 24-bit PCM is officially supported for DoP."""

PCM_MAX = 32767
PCM_MIN = -32768

WAV_HEADER_SIZE = 44


@dataclass(frozen=True)
class OutputConfig:
    """Requested PCM output format."""

    sample_rate: int
    """Sample rate in Hz."""

    channels: int
    """Number of output channels."""

    bit_depth: int
    """Bits per sample (16, 24 or 32)."""

    use_dop: bool = False
    """Whether to apply the DoP marker to every sample."""

    @property
    def bytes_per_sample(self) -> int:
        """Bytes per sample."""
        return self.bit_depth // 8

    @property
    def block_align(self) -> int:
        """Frame size in bytes."""
        return self.channels * self.bytes_per_sample

    @property
    def byte_rate(self) -> int:
        """Average bytes per second."""
        return self.sample_rate * self.block_align


@dataclass
class PipelineConfig:
    """Configuration for ConversionPipeline."""

    block_size: int = DSD_BLOCK_SIZE
    """DSD block size in bytes. Default: 4096."""

    decoder: str = "low-bit"
    """Name of the registered decode strategy. Default: low-bit."""


@dataclass(frozen=True)
class ContainerHeader:
    """The 28-byte DSF preamble."""

    raw: bytes

    @property
    def chunk_id(self) -> bytes:
        return self.raw[0:4]

    @property
    def format_id(self) -> bytes:
        return self.raw[12:16]


@dataclass
class PcmBuffer:
    """Signed 16-bit PCM samples, one per decoded DSD byte."""

    samples: array = field(default_factory=lambda: array("h"))

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self):
        return iter(self.samples)

    def __getitem__(self, index):
        return self.samples[index]

    def extend(self, values: Iterable[int]) -> None:
        self.samples.extend(values)

    @classmethod
    def from_samples(cls, values: Iterable[int]) -> "PcmBuffer":
        return cls(array("h", values))

    def to_bytes(self, bytes_per_sample: int = 2) -> Union[bytes, bytearray]:
        """
        Serialize samples as little-endian signed integers.

        16-bit samples are written verbatim. Wider samples are
        left-justified so the 16-bit value occupies the most significant
        bytes and the low bytes are zero.

        Args:
            bytes_per_sample: Output width in bytes (2, 3 or 4).

        Returns:
            Raw PCM bytes, len(self) * bytes_per_sample long.
        """
        if bytes_per_sample < 2:
            raise ValueError(f"Unsupported sample width: {bytes_per_sample} bytes")

        data = array("h", self.samples)
        if data.itemsize != 2:
            raise ValueError("Platform has no 16-bit array type")
        if sys.byteorder == "big":
            data.byteswap()
        data16 = data.tobytes()
        if bytes_per_sample == 2:
            return data16

        width = bytes_per_sample
        out = bytearray(len(data) * width)
        out[width - 2::width] = data16[0::2]
        out[width - 1::width] = data16[1::2]
        return out


@dataclass(frozen=True)
class WavParams:
    """WAV fmt chunk parameters."""

    sample_rate: int
    channels: int
    bit_depth: int

    @property
    def bytes_per_sample(self) -> int:
        return self.bit_depth // 8

    @property
    def block_align(self) -> int:
        return self.channels * self.bytes_per_sample

    @property
    def byte_rate(self) -> int:
        return self.sample_rate * self.block_align


@dataclass
class WavInfo:
    """Header fields of a PCM WAV file read back from disk."""

    params: WavParams
    """Format parameters from the fmt chunk."""

    byte_rate: int
    """Declared byte rate."""

    block_align: int
    """Declared block alignment."""

    data_size: int
    """Declared size of the data chunk in bytes."""

    data: Optional[bytes] = None
    """Raw sample bytes, if loaded."""

    @property
    def sample_count(self) -> int:
        """Number of individual samples in the data chunk."""
        return self.data_size // self.params.bytes_per_sample


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a successful conversion."""

    output_path: str
    sample_count: int
    data_size: int
    file_size: int
