"""Conversion pipeline: DSF input to PCM WAV output."""

from typing import Optional
from dsf2wav.core.configurations import DEFAULT_TABLE, ConfigurationTable
from dsf2wav.core.exceptions import ConversionError, InputOpenError, InvalidConfigError
from dsf2wav.core.interfaces import IDsdDecoder, IWavWriter
from dsf2wav.core.models import (
    DOP_BIT_DEPTH,
    ConversionResult,
    OutputConfig,
    PipelineConfig,
)
from dsf2wav.decoders import get_decoder
from dsf2wav.formats.dsf import read_header
from dsf2wav.formats.wav import write_wav
from dsf2wav.utils.log import get_logger

logger = get_logger(__name__)


class ConversionPipeline:
    """
    Runs validation, header check, decode and WAV write in sequence.

    Responsibilities:
    - Reject output configurations missing from the table before any I/O
    - Keep the input handle open only for header read and decode
    - Stop at the first failing stage

    A WAV file left behind by a failure during the write stage is not
    removed.
    """

    def __init__(
        self,
        table: ConfigurationTable = DEFAULT_TABLE,
        decoder: Optional[IDsdDecoder] = None,
        writer: IWavWriter = write_wav,
        config: Optional[PipelineConfig] = None,
    ):
        """
        Initialize pipeline.

        Args:
            table: Legal output configurations.
            decoder: Optional decode strategy (default: from config.decoder).
            writer: WAV writer callable (replaceable for testing).
            config: Pipeline configuration.
        """
        self._table = table
        self._decoder = decoder
        if self._decoder is None:
            if config is None:
                config = PipelineConfig()
            self._decoder = get_decoder(config.decoder, config.block_size)
        self._writer = writer

    @property
    def table(self) -> ConfigurationTable:
        return self._table

    @property
    def decoder(self) -> IDsdDecoder:
        return self._decoder

    def run(self, input_path: str, output_path: str, config: OutputConfig) -> ConversionResult:
        """
        Convert a DSF file to WAV, raising on the first failure.

        Args:
            input_path: DSF file to read.
            output_path: WAV file to create.
            config: Requested output format.

        Returns:
            ConversionResult describing the written file.

        Raises:
            InvalidConfigError: If the output triple is not in the table.
            InputOpenError: If the input cannot be opened.
            MalformedHeaderError: If the DSF tags are missing.
            WavWriteError: If the output cannot be written.
        """
        if not self._table.is_valid(config.sample_rate, config.channels, config.bit_depth):
            raise InvalidConfigError(config.sample_rate, config.channels, config.bit_depth)

        if config.use_dop and config.bit_depth != DOP_BIT_DEPTH:
            logger.warning(
                f"DoP requested with {config.bit_depth}-bit output; "
                f"only {DOP_BIT_DEPTH}-bit is officially supported"
            )

        try:
            f = open(input_path, "rb")
        except OSError as e:
            raise InputOpenError("Error opening DSF file", path=str(input_path)) from e

        with f:
            read_header(f)
            logger.info(f"Reading DSD data from {input_path}")
            pcm = self._decoder.decode(f, config.use_dop)

        file_size = self._writer(
            output_path, pcm, config.sample_rate, config.channels, config.bit_depth
        )
        return ConversionResult(
            output_path=str(output_path),
            sample_count=len(pcm),
            data_size=len(pcm) * config.bytes_per_sample,
            file_size=file_size,
        )

    def convert(self, input_path: str, output_path: str, config: OutputConfig) -> bool:
        """
        Convert a DSF file to WAV.

        Returns:
            True on success; False after logging the failure.
        """
        try:
            self.run(input_path, output_path, config)
        except ConversionError as e:
            logger.error(str(e))
            return False
        return True


def convert(
    input_path: str,
    output_path: str,
    bit_depth: int,
    sample_rate: int,
    channels: int,
    use_dop: bool = False,
) -> bool:
    """Convert with the default table and decoder."""
    config = OutputConfig(
        sample_rate=sample_rate, channels=channels, bit_depth=bit_depth, use_dop=use_dop
    )
    return ConversionPipeline().convert(input_path, output_path, config)
