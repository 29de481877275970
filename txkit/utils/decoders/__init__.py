from .base import LogDecoder
from .event_list import PreDecodedEventList
from .raw_log import RawLogWithInterfaceDecoder
from .manager import DecoderManager

__all__ = ["LogDecoder", "PreDecodedEventList", "RawLogWithInterfaceDecoder", "DecoderManager"]
