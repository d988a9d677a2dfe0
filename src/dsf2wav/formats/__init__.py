"""Container formats: DSF input and WAV output."""

from dsf2wav.formats.dsf import DsfFormat, dsf_format, read_header
from dsf2wav.formats.wav import build_wav_header, read_wav_info, write_wav

__all__ = [
    "DsfFormat",
    "dsf_format",
    "read_header",
    "build_wav_header",
    "read_wav_info",
    "write_wav",
]
