"""DSD decode strategies with name-based registration."""

from typing import Callable, Dict, Tuple
from dsf2wav.core.interfaces import IDsdDecoder
from dsf2wav.core.models import DSD_BLOCK_SIZE
from dsf2wav.decoders.low_bit import LowBitDecoder
from dsf2wav.utils.log import get_logger

logger = get_logger(__name__)

DEFAULT_DECODER = LowBitDecoder.name

# Registry of decoder factories, keyed by name; each takes a block size
_decoder_registry: Dict[str, Callable[[int], IDsdDecoder]] = {}


def register_decoder(name: str, factory: Callable[[int], IDsdDecoder]) -> None:
    """
    Register a decode strategy.

    Args:
        name: Registry name.
        factory: Callable taking a block size and returning a decoder.
    """
    key = name.lower()
    if key in _decoder_registry:
        logger.warning(f"Decoder {key} already registered, overwriting")
    _decoder_registry[key] = factory
    logger.debug(f"Registered decoder {key}")


def get_decoder(name: str = DEFAULT_DECODER, block_size: int = DSD_BLOCK_SIZE) -> IDsdDecoder:
    """
    Create a decoder by name.

    Raises:
        KeyError: If no decoder is registered under that name.
    """
    key = name.lower()
    if key not in _decoder_registry:
        raise KeyError(
            f"Unknown decoder: {name}. "
            f"Available: {', '.join(available_decoders())}"
        )
    return _decoder_registry[key](block_size)


def available_decoders() -> Tuple[str, ...]:
    return tuple(sorted(_decoder_registry))


register_decoder(LowBitDecoder.name, LowBitDecoder)

__all__ = [
    "DEFAULT_DECODER",
    "LowBitDecoder",
    "available_decoders",
    "get_decoder",
    "register_decoder",
]
