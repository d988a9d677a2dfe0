"""Placeholder DSD decoder selecting full-scale PCM from each byte's low bit."""

from typing import BinaryIO, Tuple
from dsf2wav.core.models import DOP_MARKER, DSD_BLOCK_SIZE, PCM_MAX, PCM_MIN, PcmBuffer
from dsf2wav.utils.log import get_logger

logger = get_logger(__name__)


def _build_lookup(use_dop: bool) -> Tuple[int, ...]:
    """Map every byte value to its output sample."""
    table = []
    for value in range(256):
        sample = PCM_MAX if value & 1 else PCM_MIN
        if use_dop:
            sample |= DOP_MARKER
        table.append(sample)
    return tuple(table)


_PLAIN = _build_lookup(False)
_DOP = _build_lookup(True)


class LowBitDecoder:
    """
    One PCM sample per DSD byte, driven by the byte's low bit.

    Low bit 1 maps to the maximum positive 16-bit value, low bit 0 to the
    maximum negative one. No filtering or rate conversion takes place, so
    the sample count always equals the number of bytes read.
    """

    name = "low-bit"

    def __init__(self, block_size: int = DSD_BLOCK_SIZE):
        """
        Initialize decoder.

        Args:
            block_size: Bytes to read per block.
        """
        if block_size <= 0:
            raise ValueError(f"block_size must be positive, got {block_size}")
        self._block_size = block_size

    @property
    def block_size(self) -> int:
        return self._block_size

    def decode(self, stream: BinaryIO, use_dop: bool = False) -> PcmBuffer:
        """
        Decode raw DSD bytes until end-of-stream.

        A trailing partial block is decoded for the bytes actually read.
        If a read fails, output stops after the last complete read.

        Args:
            stream: Binary stream positioned at the first DSD byte.
            use_dop: OR the DoP marker into every sample.

        Returns:
            PcmBuffer with one sample per byte consumed.
        """
        lookup = _DOP if use_dop else _PLAIN
        pcm = PcmBuffer()
        blocks = 0

        while True:
            try:
                block = stream.read(self._block_size)
            except OSError as e:
                logger.warning(
                    f"Read error after {len(pcm)} bytes, truncating output: {e}"
                )
                break

            if not block:
                break

            pcm.extend(map(lookup.__getitem__, block))
            blocks += 1
            logger.debug(f"Decoded block {blocks} ({len(block)} bytes)")

        logger.info(f"Decoded {len(pcm)} samples from {blocks} blocks (DoP={use_dop})")
        return pcm
