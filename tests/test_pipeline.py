"""Tests for the conversion pipeline."""

import logging
import struct
import pytest
from dsf2wav.core.exceptions import (
    InputOpenError,
    InvalidConfigError,
    MalformedHeaderError,
    WavWriteError,
)
from dsf2wav.core.models import OutputConfig, PipelineConfig
from dsf2wav.decoders.low_bit import LowBitDecoder
from dsf2wav.formats.wav import write_wav
from dsf2wav.services.conversion import ConversionPipeline, convert
from conftest import make_dsf_header


class RecordingDecoder:
    """Decoder that records calls and delegates to LowBitDecoder."""

    name = "recording"

    def __init__(self):
        self.calls = 0

    def decode(self, stream, use_dop=False):
        self.calls += 1
        return LowBitDecoder().decode(stream, use_dop)


class RecordingWriter:
    """Writer that records calls and delegates to write_wav."""

    def __init__(self):
        self.calls = []

    def __call__(self, path, pcm, sample_rate, channels, bit_depth):
        self.calls.append((path, len(pcm), sample_rate, channels, bit_depth))
        return write_wav(path, pcm, sample_rate, channels, bit_depth)


STEREO_16 = OutputConfig(sample_rate=176400, channels=2, bit_depth=16)


def test_convert_alternating_block(alternating_dsf, tmp_path):
    """Test the full conversion of one alternating 4096-byte block."""
    output = tmp_path / "out.wav"

    assert ConversionPipeline().convert(str(alternating_dsf), str(output), STEREO_16)

    raw = output.read_bytes()
    assert len(raw) == 44 + 4096 * 2
    assert raw[0:4] == b"RIFF"
    assert raw[8:12] == b"WAVE"
    assert struct.unpack("<I", raw[40:44])[0] == 4096 * 2
    samples = struct.unpack("<4096h", raw[44:])
    assert samples[:4] == (32767, -32768, 32767, -32768)
    assert samples == (32767, -32768) * 2048


def test_run_returns_result(alternating_dsf, tmp_path):
    output = tmp_path / "out.wav"
    config = OutputConfig(sample_rate=352800, channels=2, bit_depth=24)

    result = ConversionPipeline().run(str(alternating_dsf), str(output), config)

    assert result.output_path == str(output)
    assert result.sample_count == 4096
    assert result.data_size == 4096 * 3
    assert result.file_size == 44 + 4096 * 3
    assert output.stat().st_size == result.file_size


def test_convert_with_dop(alternating_dsf, tmp_path):
    output = tmp_path / "dop.wav"
    config = OutputConfig(sample_rate=176400, channels=2, bit_depth=16, use_dop=True)

    assert ConversionPipeline().convert(str(alternating_dsf), str(output), config)

    samples = struct.unpack("<4096h", output.read_bytes()[44:])
    assert all(sample & 0x05FA == 0x05FA for sample in samples)


def test_dop_with_non_24bit_warns(alternating_dsf, tmp_path, caplog):
    config = OutputConfig(sample_rate=176400, channels=2, bit_depth=16, use_dop=True)

    with caplog.at_level(logging.WARNING, logger="dsf2wav.services.conversion"):
        ConversionPipeline().run(str(alternating_dsf), str(tmp_path / "out.wav"), config)

    assert "24-bit" in caplog.text


def test_invalid_config_touches_no_files(alternating_dsf, tmp_path):
    """Test that an unknown sample rate fails before any file is opened."""
    output = tmp_path / "out.wav"
    decoder = RecordingDecoder()
    writer = RecordingWriter()
    pipeline = ConversionPipeline(decoder=decoder, writer=writer)
    config = OutputConfig(sample_rate=999999, channels=2, bit_depth=16)

    assert not pipeline.convert(str(alternating_dsf), str(output), config)
    assert decoder.calls == 0
    assert writer.calls == []
    assert not output.exists()

    with pytest.raises(InvalidConfigError):
        pipeline.run(str(tmp_path / "does-not-exist.dsf"), str(output), config)


def test_short_file_fails_before_decode(tmp_path):
    source = tmp_path / "short.dsf"
    source.write_bytes(b"DSD " + b"\x00" * 10)
    output = tmp_path / "out.wav"
    decoder = RecordingDecoder()
    writer = RecordingWriter()
    pipeline = ConversionPipeline(decoder=decoder, writer=writer)

    assert not pipeline.convert(str(source), str(output), STEREO_16)
    assert decoder.calls == 0
    assert writer.calls == []
    assert not output.exists()

    with pytest.raises(MalformedHeaderError):
        pipeline.run(str(source), str(output), STEREO_16)


def test_wrong_tags_fail(tmp_path):
    source = tmp_path / "bad.dsf"
    source.write_bytes(make_dsf_header(chunk_id=b"RIFF") + b"\x01" * 16)

    with pytest.raises(MalformedHeaderError):
        ConversionPipeline().run(str(source), str(tmp_path / "out.wav"), STEREO_16)


def test_missing_input(tmp_path):
    pipeline = ConversionPipeline()
    missing = tmp_path / "missing.dsf"

    assert not pipeline.convert(str(missing), str(tmp_path / "out.wav"), STEREO_16)
    with pytest.raises(InputOpenError) as excinfo:
        pipeline.run(str(missing), str(tmp_path / "out.wav"), STEREO_16)
    assert excinfo.value.path == str(missing)


def test_unwritable_output(alternating_dsf, tmp_path):
    output = tmp_path / "no-such-dir" / "out.wav"
    pipeline = ConversionPipeline()

    assert not pipeline.convert(str(alternating_dsf), str(output), STEREO_16)
    with pytest.raises(WavWriteError):
        pipeline.run(str(alternating_dsf), str(output), STEREO_16)


def test_header_only_file(tmp_path, dsf_header):
    source = tmp_path / "empty.dsf"
    source.write_bytes(dsf_header)
    output = tmp_path / "out.wav"

    result = ConversionPipeline().run(str(source), str(output), STEREO_16)

    assert result.sample_count == 0
    assert output.stat().st_size == 44


def test_decoder_passed_to_writer(alternating_dsf, tmp_path):
    writer = RecordingWriter()
    pipeline = ConversionPipeline(writer=writer, config=PipelineConfig(block_size=100))
    output = str(tmp_path / "out.wav")

    pipeline.run(str(alternating_dsf), output, OutputConfig(705600, 6, 24))

    assert pipeline.decoder.block_size == 100
    assert writer.calls == [(output, 4096, 705600, 6, 24)]


def test_module_convert(alternating_dsf, tmp_path):
    output = tmp_path / "out.wav"
    assert convert(str(alternating_dsf), str(output), 16, 176400, 2)
    assert not convert(str(alternating_dsf), str(output), 16, 999999, 2)


def test_error_taxonomy():
    from dsf2wav.core.exceptions import (
        ConversionError,
        ConversionIOError,
        InvalidConfig,
        IoError,
        MalformedHeader,
    )

    assert InvalidConfig is InvalidConfigError
    assert MalformedHeader is MalformedHeaderError
    assert IoError is ConversionIOError
    assert issubclass(InputOpenError, IoError)
    assert issubclass(WavWriteError, IoError)
    for error in (InvalidConfig, MalformedHeader, IoError):
        assert issubclass(error, ConversionError)

    error = InvalidConfigError(999999, 2, 16)
    assert "999999" in str(error)


def test_oversized_output_returns_false(alternating_dsf, tmp_path):
    def oversized_writer(path, pcm, sample_rate, channels, bit_depth):
        raise WavWriteError("WAV data chunk too large", path=path)

    pipeline = ConversionPipeline(writer=oversized_writer)
    assert not pipeline.convert(str(alternating_dsf), str(tmp_path / "out.wav"), STEREO_16)


def test_default_pipeline_config_not_shared():
    first = ConversionPipeline()
    second = ConversionPipeline(config=PipelineConfig(block_size=64))
    third = ConversionPipeline()

    assert first.decoder.block_size == 4096
    assert second.decoder.block_size == 64
    assert third.decoder.block_size == 4096
    assert first.decoder is not third.decoder
