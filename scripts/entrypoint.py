#!/usr/bin/env python3
import os
import json
import subprocess
import sys
from string import Template
from dotenv import load_dotenv

CONFIG_DIR = os.path.join('txkit', 'config') # Relative to the repository root
TEMPLATE_FILE = os.path.join(CONFIG_DIR, 'settings.template.json')
SETTINGS_FILE = os.path.join(CONFIG_DIR, 'settings.json')

# Everything but RPC_URL may be left unset
TEMPLATE_DEFAULTS = {
    "RPC_RETRY": "0",
    "RPC_TIMEOUT": "30",
    "LOG_DEBUG": "false",
    "LOG_TO_FILES": "false",
    "LOG_LEVEL": "INFO",
    "LOG_DIR": "logs",
    "DECODER_KIND": "raw_log",
    "DECODER_ABI_PATH": "",
    "BATCH_PRE_SIGNED_FILE": "txs/pre_signed.txt",
    "BATCH_OUTPUT_DIR": "txs",
    "BATCH_POLL_INTERVAL": "1.0",
    "BATCH_EVENT_NAME": "",
}


def render_settings(template_text: str, environ) -> dict:
    """Substitute ``${VAR}`` placeholders and parse the result.

    Raises:
        KeyError: If a variable without default is unset
        json.JSONDecodeError: If the substituted text is not JSON
    """
    values = {**TEMPLATE_DEFAULTS, **environ}
    return json.loads(Template(template_text).substitute(values))


def fill_template(template_file: str = TEMPLATE_FILE, settings_file: str = SETTINGS_FILE):
    """Fill settings template with environment variables"""
    load_dotenv() # Load .env file if present

    if not os.path.exists(template_file):
        print(f"ERROR: Template file not found at {template_file}")
        sys.exit(1)

    with open(template_file, 'r') as f:
        template_text = f.read()

    print("--- Substituting settings template ---")
    try:
        settings = render_settings(template_text, os.environ)
    except KeyError as e:
        print(f"ERROR: Missing environment variable for substitution: {e}. Check template and env vars.")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"ERROR: Substituted template resulted in invalid JSON: {e}")
        sys.exit(1)

    print(f"Writing final settings to {settings_file}")
    with open(settings_file, 'w') as f:
        json.dump(settings, f, indent=2)
    print("--- Settings substitution complete ---")


if __name__ == "__main__":
    fill_template()
    print("Executing batch run: python -m txkit.main")
    result = subprocess.run([sys.executable, "-m", "txkit.main"], check=False)
    sys.exit(result.returncode)
