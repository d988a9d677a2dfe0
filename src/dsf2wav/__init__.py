"""
dsf2wav - convert DSD audio in DSF containers to PCM WAV files.

This package validates a requested PCM output configuration, checks the
DSF preamble, decodes the DSD bit-stream into 16-bit PCM (optionally with
DoP markers) and writes a canonical 44-byte-header WAV file.
"""

from dsf2wav.core.configurations import DEFAULT_TABLE, ConfigurationTable, is_valid_config
from dsf2wav.core.exceptions import (
    ConversionError,
    ConversionIOError,
    InputOpenError,
    InvalidConfigError,
    MalformedHeaderError,
    WavWriteError,
)
from dsf2wav.core.models import ConversionResult, OutputConfig, PcmBuffer, PipelineConfig
from dsf2wav.decoders import LowBitDecoder, get_decoder, register_decoder
from dsf2wav.formats.dsf import read_header
from dsf2wav.formats.wav import read_wav_info, write_wav
from dsf2wav.services.conversion import ConversionPipeline, convert

__version__ = "0.1.0"

__all__ = [
    "ConfigurationTable",
    "ConversionError",
    "ConversionIOError",
    "ConversionPipeline",
    "ConversionResult",
    "DEFAULT_TABLE",
    "InputOpenError",
    "InvalidConfigError",
    "LowBitDecoder",
    "MalformedHeaderError",
    "OutputConfig",
    "PcmBuffer",
    "PipelineConfig",
    "WavWriteError",
    "convert",
    "get_decoder",
    "is_valid_config",
    "read_header",
    "read_wav_info",
    "register_decoder",
    "write_wav",
]
