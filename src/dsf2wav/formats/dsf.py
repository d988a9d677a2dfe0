"""DSF container preamble reader."""

from pathlib import Path
from typing import BinaryIO
from dsf2wav.core.exceptions import MalformedHeaderError
from dsf2wav.core.models import DSD_TAG, DSF_HEADER_SIZE, FMT_TAG, ContainerHeader
from dsf2wav.utils.log import get_logger

logger = get_logger(__name__)


class DsfFormat:
    """DSF container sniffing and header validation."""

    def can_load(self, path: str) -> bool:
        """Check if file looks like a DSF container (tags only, never raises)."""
        path_obj = Path(path)
        if not path_obj.is_file():
            return False

        try:
            with open(path_obj, "rb") as f:
                read_header(f)
        except (OSError, MalformedHeaderError):
            return False
        return True


def read_header(stream: BinaryIO) -> ContainerHeader:
    """
    Read and validate the 28-byte DSF preamble.

    Only the "DSD " chunk tag (bytes 0-3) and the "fmt " tag (bytes 12-15)
    are checked; file size and metadata offset are skipped. On success the
    stream is positioned immediately after the preamble.

    Args:
        stream: Binary stream positioned at the start of the container.

    Returns:
        ContainerHeader with the raw preamble bytes.

    Raises:
        MalformedHeaderError: If the preamble is short or a tag is wrong.
    """
    raw = stream.read(DSF_HEADER_SIZE)
    if len(raw) < DSF_HEADER_SIZE:
        raise MalformedHeaderError(
            f"DSF header truncated: got {len(raw)} of {DSF_HEADER_SIZE} bytes"
        )

    header = ContainerHeader(raw=bytes(raw))
    if header.chunk_id != DSD_TAG:
        raise MalformedHeaderError(f"Not a DSF file: chunk id {header.chunk_id!r}")
    if header.format_id != FMT_TAG:
        raise MalformedHeaderError(f"Missing fmt chunk: found {header.format_id!r}")

    logger.debug("DSF header accepted")
    return header


dsf_format = DsfFormat()
