import os
import json
from functools import lru_cache
from txkit.utils.models.settings_model import Settings
from txkit.utils.logging import logger

CONFIG_DIR = os.path.dirname(__file__)
DEFAULT_SETTINGS_FILE = os.path.join(CONFIG_DIR, 'settings.json')

_logger = logger.bind(module='ConfigLoader')


def get_settings_file() -> str:
    return os.getenv('TXKIT_SETTINGS_FILE', DEFAULT_SETTINGS_FILE)


@lru_cache()
def get_core_config() -> Settings:
    """Load settings from the settings.json file."""
    settings_file = get_settings_file()
    _logger.info(f"📖 Loading settings from: {settings_file}")
    if not os.path.exists(settings_file):
        _logger.error(f"❌ Settings file not found at {settings_file}")
        raise RuntimeError(f"Settings file not found at {settings_file}. Ensure the entrypoint script has run.")
    try:
        with open(settings_file, 'r') as f:
            settings_dict = json.load(f)
        settings = Settings(**settings_dict)
        _logger.success("✅ Successfully loaded settings")
        return settings
    except json.JSONDecodeError as e:
        _logger.error(f"❌ Error decoding settings file: {e}")
        raise RuntimeError(f"Error decoding settings file ({settings_file}): {str(e)}")
    except Exception as e:
        _logger.error(f"❌ Error loading settings: {e}")
        raise RuntimeError(f"Error loading settings from {settings_file}: {str(e)}")
