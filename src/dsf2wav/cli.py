"""Command-line entry point: dsf2wav <input.dsf> <output.wav> <bitwidth> <samplerate> <channels> [dop]."""

import sys
from typing import List, Optional, TextIO
from dsf2wav.core.configurations import DEFAULT_TABLE, ConfigurationTable
from dsf2wav.core.models import OutputConfig
from dsf2wav.services.conversion import ConversionPipeline
from dsf2wav.utils.validate import parse_dop_flag, parse_int

PROG = "dsf2wav"


def print_usage(
    stream: Optional[TextIO] = None, table: ConfigurationTable = DEFAULT_TABLE, prog: str = PROG
) -> None:
    """Print usage, the DoP notes and every legal output configuration."""
    if stream is None:
        stream = sys.stderr
    print(
        f"Usage: {prog} <input.dsf> <output.wav> <bitwidth> <samplerate> <channels> [dop]",
        file=stream,
    )
    print("", file=stream)
    print("DoP (DSD over PCM) Explanation:", file=stream)
    print(
        " - DoP wraps DSD inside a PCM stream for compatibility with standard "
        "PCM transports (USB, SPDIF).",
        file=stream,
    )
    print(
        " - Only 24-bit PCM is officially supported for DoP, as it reserves "
        "8 bits for DoP markers.",
        file=stream,
    )
    print(" - Use 'dop' flag only if your DAC supports DoP decoding.", file=stream)
    print("", file=stream)
    print("Possible Conversions:", file=stream)
    for rate, channels, bit_depth in table.entries():
        print(
            f" - Sample Rate: {rate} Hz, Channels: {channels}, Bit Width: {bit_depth}-bit",
            file=stream,
        )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the converter; returns the process exit status."""
    args = sys.argv[1:] if argv is None else argv

    if len(args) < 5:
        print_usage()
        return 1

    input_path, output_path = args[0], args[1]
    try:
        bit_depth = parse_int(args[2], "bitwidth")
        sample_rate = parse_int(args[3], "samplerate")
        channels = parse_int(args[4], "channels")
        use_dop = parse_dop_flag(args[5] if len(args) > 5 else None)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        print_usage()
        return 1

    config = OutputConfig(
        sample_rate=sample_rate, channels=channels, bit_depth=bit_depth, use_dop=use_dop
    )
    if ConversionPipeline().convert(input_path, output_path, config):
        print("Conversion successful!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
