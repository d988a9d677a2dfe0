"""Example: Convert a DSF file to 24-bit stereo WAV."""

import sys
from pathlib import Path

from dsf2wav import ConversionPipeline, OutputConfig, ConversionError

if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python convert_dsf.py <input.dsf> <output.wav> [dop]")
        sys.exit(1)

    dsf_path = sys.argv[1]
    if not Path(dsf_path).exists():
        print(f"Error: File not found: {dsf_path}")
        sys.exit(1)

    config = OutputConfig(
        sample_rate=352800,
        channels=2,
        bit_depth=24,
        use_dop=len(sys.argv) > 3,
    )

    try:
        result = ConversionPipeline().run(dsf_path, sys.argv[2], config)
    except ConversionError as e:
        print(f"Conversion failed: {e}")
        sys.exit(1)

    print(f"Wrote {result.sample_count} samples ({result.file_size} bytes) to {result.output_path}")
