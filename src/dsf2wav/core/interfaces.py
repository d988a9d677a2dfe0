"""Protocol interfaces for pluggable pipeline stages."""

from typing import BinaryIO, Protocol
from dsf2wav.core.models import PcmBuffer


class IDsdDecoder(Protocol):
    """Interface for a DSD-to-PCM decode strategy."""

    @property
    def name(self) -> str:
        """Registry name of the strategy."""
        ...

    def decode(self, stream: BinaryIO, use_dop: bool = False) -> PcmBuffer:
        """
        Decode raw DSD bytes from the current stream position to end-of-stream.

        Must produce exactly one PCM sample per input byte consumed.
        """
        ...


class IWavWriter(Protocol):
    """Interface for the WAV output stage."""

    def __call__(
        self, path: str, pcm: PcmBuffer, sample_rate: int, channels: int, bit_depth: int
    ) -> int:
        """Write the WAV file and return the number of bytes written."""
        ...
