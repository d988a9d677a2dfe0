"""RIFF WAV container writer and reader."""

import struct
from pathlib import Path
from typing import BinaryIO, Union
from dsf2wav.core.exceptions import MalformedHeaderError, WavWriteError
from dsf2wav.core.models import PcmBuffer, WavInfo, WavParams, WAV_HEADER_SIZE
from dsf2wav.utils.log import get_logger

logger = get_logger(__name__)

# RIFF header + fmt chunk + data chunk header
_HEADER_STRUCT = struct.Struct("<4sI4s4sIHHIIHH4sI")

SUPPORTED_BIT_DEPTHS = (16, 24, 32)

# Largest data chunk whose RIFF size (36 + data size) still fits in 32 bits
MAX_DATA_SIZE = 0xFFFFFFFF - 36


def build_wav_header(params: WavParams, data_size: int) -> bytes:
    """
    Build the canonical 44-byte PCM WAV header.

    Args:
        params: Sample rate, channel count and bit depth.
        data_size: Size of the data chunk in bytes.

    Returns:
        44-byte header.
    """
    header = _HEADER_STRUCT.pack(
        b"RIFF",
        36 + data_size,
        b"WAVE",
        b"fmt ",
        16,  # fmt chunk size
        1,  # PCM
        params.channels,
        params.sample_rate,
        params.byte_rate,
        params.block_align,
        params.bit_depth,
        b"data",
        data_size,
    )
    return header


def write_wav(
    path: str, pcm: PcmBuffer, sample_rate: int, channels: int, bit_depth: int
) -> int:
    """
    Write PCM samples to a WAV file.

    The format triple is written as given; checking it against the
    configuration table is the caller's job.

    Args:
        path: Destination path (created or truncated).
        pcm: Decoded samples.
        sample_rate: Sample rate in Hz.
        channels: Number of channels.
        bit_depth: Bits per sample.

    Returns:
        Total number of bytes written (44 + data size).

    Raises:
        WavWriteError: If the destination cannot be opened or written,
            or the data exceeds the 4 GiB RIFF limit.
    """
    params = WavParams(sample_rate=sample_rate, channels=channels, bit_depth=bit_depth)
    data = pcm.to_bytes(params.bytes_per_sample)
    data_size = len(data)
    if data_size > MAX_DATA_SIZE:
        raise WavWriteError(
            f"WAV data chunk too large: {data_size} bytes exceeds {MAX_DATA_SIZE}",
            path=str(path),
        )

    try:
        with open(path, "wb") as f:
            f.write(build_wav_header(params, data_size))
            f.write(data)
    except OSError as e:
        raise WavWriteError("Error opening WAV file for writing", path=str(path)) from e

    logger.info(
        f"Wrote WAV: {channels}ch, {sample_rate}Hz, {bit_depth}bit, "
        f"{len(pcm)} samples to {path}"
    )
    return WAV_HEADER_SIZE + data_size


def read_wav_info(source: Union[str, Path, BinaryIO], load_data: bool = False) -> WavInfo:
    """
    Read the header of a PCM WAV file.

    Args:
        source: Path or binary stream positioned at the RIFF header.
        load_data: Also return the raw data chunk.

    Returns:
        WavInfo with the fmt chunk fields and data size.

    Raises:
        MalformedHeaderError: If the file is not a supported PCM WAV.
        FileNotFoundError: If the path does not exist.
    """
    if isinstance(source, (str, Path)):
        path_obj = Path(source)
        if not path_obj.exists():
            raise FileNotFoundError(f"WAV file not found: {source}")
        with open(path_obj, "rb") as f:
            return _parse_wav(f, load_data)
    return _parse_wav(source, load_data)


def _parse_wav(f: BinaryIO, load_data: bool) -> WavInfo:
    """Parse WAV header from file handle."""
    riff = f.read(4)
    if riff != b"RIFF":
        raise MalformedHeaderError("Not a RIFF file")

    f.read(4)  # RIFF chunk size

    wave = f.read(4)
    if wave != b"WAVE":
        raise MalformedHeaderError("Not a WAVE file")

    fmt_data = None
    data_size = None
    data = None

    while True:
        chunk_id = f.read(4)
        if len(chunk_id) < 4:
            break

        size_bytes = f.read(4)
        if len(size_bytes) < 4:
            break
        chunk_size = struct.unpack("<I", size_bytes)[0]

        if chunk_id == b"fmt ":
            fmt_data = f.read(chunk_size)
        elif chunk_id == b"data":
            data_size = chunk_size
            if load_data:
                data = f.read(chunk_size)
            break
        else:
            # Skip unknown chunks (padded to even size)
            f.seek(chunk_size + (chunk_size & 1), 1)

    if fmt_data is None:
        raise MalformedHeaderError("Missing fmt chunk")

    if data_size is None:
        raise MalformedHeaderError("Missing data chunk")

    # Format: audio_format(2), num_channels(2), sample_rate(4),
    #         byte_rate(4), block_align(2), bits_per_sample(2)
    if len(fmt_data) < 16:
        raise MalformedHeaderError("Invalid fmt chunk size")

    audio_format, channels, sample_rate, byte_rate, block_align, bit_depth = struct.unpack(
        "<HHIIHH", fmt_data[0:16]
    )

    if audio_format != 1:  # PCM
        raise MalformedHeaderError(
            f"Unsupported audio format: {audio_format} (only PCM=1 is supported)"
        )

    if bit_depth not in SUPPORTED_BIT_DEPTHS:
        raise MalformedHeaderError(f"Unsupported bits per sample: {bit_depth}")

    return WavInfo(
        params=WavParams(sample_rate=sample_rate, channels=channels, bit_depth=bit_depth),
        byte_rate=byte_rate,
        block_align=block_align,
        data_size=data_size,
        data=data,
    )
