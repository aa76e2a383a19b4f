import json
import os
from datetime import datetime
from pathlib import Path

DEFAULT_CONFIG_PATH = Path(__file__).parent / "runtime_config.json"

DEFAULT_CONFIG = {
    "show_trace": True,
    "enable_run_log": False,
    "output_directory": "logs/",
    "log_file_prefix": "turing_",
    "print_config": False
}

# Expected types for validation
CONFIG_SCHEMA = {
    "show_trace": bool,
    "enable_run_log": bool,
    "output_directory": str,
    "log_file_prefix": str,
    "print_config": bool
}

def validate_config(config):
    for key in config:
        if key not in CONFIG_SCHEMA:
            raise ValueError(f"Unknown configuration key: {key}")
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    if not config["log_file_prefix"]:
        raise ValueError("log_file_prefix must not be empty.")

def load_config(path=None):
    """Load runtime config, merged over DEFAULT_CONFIG.

    With no path, the bundled runtime_config.json is used if present and the
    defaults otherwise. An explicit path must exist.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            config = DEFAULT_CONFIG.copy()
            validate_config(config)
            return config
    elif not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)
    if not isinstance(user_config, dict):
        raise TypeError(f"Configuration file {path} must hold a JSON object.")

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    # Validate schema
    validate_config(config)

    if config["print_config"]:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config
