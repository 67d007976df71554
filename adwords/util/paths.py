"""Path utilities for locating the client configuration file."""

import os

CONFIG_DIR_ENV = "ADWORDS_CONFIG_DIR"
CONFIG_FILE_NAME = "adwords.json"


def get_runtime_path() -> str:
    """
    Get the directory that holds user files (the JSON configuration).

    The ADWORDS_CONFIG_DIR environment variable wins when set; otherwise
    this is the current working directory.
    """
    return os.environ.get(CONFIG_DIR_ENV) or os.getcwd()


def get_config_path() -> str:
    """Full path of the JSON configuration file (it may not exist)."""
    return os.path.join(get_runtime_path(), CONFIG_FILE_NAME)
