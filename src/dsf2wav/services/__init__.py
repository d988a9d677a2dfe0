"""Services layer for conversion orchestration."""

from dsf2wav.services.conversion import ConversionPipeline, convert

__all__ = ["ConversionPipeline", "convert"]
