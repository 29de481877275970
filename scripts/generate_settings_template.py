import json
import os

# Define the template structure matching txkit/utils/models/settings_model.py
def generate_template():
    """Generate template settings.json with placeholder values"""
    template = {
        "rpc": {
            "url": "${RPC_URL}",
            "retry": "${RPC_RETRY}",
            "request_time_out": "${RPC_TIMEOUT}"
        },
        "logs": {
            "debug_mode": "${LOG_DEBUG}",
            "write_to_files": "${LOG_TO_FILES}",
            "level": "${LOG_LEVEL}",
            "logs_dir": "${LOG_DIR}"
        },
        "decoder": {
            "kind": "${DECODER_KIND}",
            "abi_path": "${DECODER_ABI_PATH}"
        },
        "batch": {
            "pre_signed_file": "${BATCH_PRE_SIGNED_FILE}",
            "output_dir": "${BATCH_OUTPUT_DIR}",
            "poll_interval": "${BATCH_POLL_INTERVAL}",
            "event_name": "${BATCH_EVENT_NAME}"
        }
    }

    # Ensure config directory exists
    config_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'txkit', 'config') # Assumes scripts/ is one level below root
    os.makedirs(config_dir, exist_ok=True)
    template_path = os.path.join(config_dir, 'settings.template.json')

    with open(template_path, 'w') as f:
        json.dump(template, f, indent=2)
    print(f"Generated template at {template_path}")

if __name__ == "__main__":
    generate_template()
