"""Exception classes for dsf2wav."""

from typing import Optional


class ConversionError(Exception):
    """Base exception for conversion failures."""
    pass


class InvalidConfigError(ConversionError):
    """Raised when the requested output triple is not in the configuration table."""

    def __init__(self, sample_rate: int, channels: int, bit_depth: int):
        self.sample_rate = sample_rate
        self.channels = channels
        self.bit_depth = bit_depth
        super().__init__(
            f"Invalid output configuration: {sample_rate} Hz, "
            f"{channels} channels, {bit_depth}-bit"
        )


class MalformedHeaderError(ConversionError):
    """Raised when the input lacks the DSF container tags."""
    pass


class ConversionIOError(ConversionError):
    """Raised when a file cannot be opened or written."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        self.message = message
        if path is not None:
            super().__init__(f"{message}: {path}")
        else:
            super().__init__(message)


class InputOpenError(ConversionIOError):
    """Raised when the DSF input cannot be opened for reading."""
    pass


class WavWriteError(ConversionIOError):
    """Raised when the WAV destination cannot be opened or written."""
    pass


# Short aliases matching the error taxonomy
InvalidConfig = InvalidConfigError
MalformedHeader = MalformedHeaderError
IoError = ConversionIOError
