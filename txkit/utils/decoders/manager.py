import importlib
from txkit.utils.models.settings_model import DecoderConfig
from txkit.utils.logging import logger
from .base import LogDecoder
from .event_list import PreDecodedEventList
from .raw_log import RawLogWithInterfaceDecoder

BUILTIN_DECODERS = {
    'event_list': PreDecodedEventList,
    'raw_log': RawLogWithInterfaceDecoder,
}


class DecoderManager:
    _logger = logger.bind(module='DecoderManager')

    @classmethod
    def load_decoder(cls, config: DecoderConfig) -> LogDecoder:
        """Build the event decoder selected by configuration."""
        cls._logger.info(f"📥 Loading event decoder: {config.kind}")
        try:
            if config.kind == 'custom':
                if not config.module or not config.class_name:
                    raise ValueError("custom decoders need both 'module' and 'class_name'")
                module = importlib.import_module(config.module)
                decoder_class = getattr(module, config.class_name)
            elif config.kind in BUILTIN_DECODERS:
                decoder_class = BUILTIN_DECODERS[config.kind]
            else:
                raise ValueError(f"unknown decoder kind '{config.kind}'")

            if decoder_class is RawLogWithInterfaceDecoder:
                if not config.abi_path:
                    raise ValueError("the raw_log decoder needs 'abi_path'")
                decoder = decoder_class(config.abi_path)
            elif config.kind == 'custom' and config.abi_path:
                decoder = decoder_class(config.abi_path)
            else:
                # abi_path only applies to ABI-backed decoders
                decoder = decoder_class()
            cls._logger.success(f"✅ Successfully loaded {decoder_class.__name__}")
            return decoder
        except Exception as e:
            cls._logger.error(f"❌ Failed to load decoder '{config.kind}': {e}")
            raise ValueError(f"Failed to load event decoder '{config.kind}': {e}")
