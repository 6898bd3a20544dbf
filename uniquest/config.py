import os

import yaml
from dotenv import load_dotenv

CONFIG_ENV_VAR = "UNIQUEST_CONFIG"
DEFAULT_CONFIG_PATH = "config.yaml"

DEFAULT_CONFIG = {
    'debug_mode': False,
    'collapse_whitespace': False,
    'echo_input': True,
    'quit_words': ["завершить", "quit"],
}


class ConfigError(Exception):
    pass


def load_config(config_path=None):
    """
    Loads config.yaml (or $UNIQUEST_CONFIG) over the defaults.
    A missing file is fine: the game runs on defaults and nothing is written.
    """
    load_dotenv()
    if config_path is None:
        config_path = os.getenv(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)

    config = dict(DEFAULT_CONFIG)
    if not os.path.exists(config_path):
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"{config_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"{config_path}: cannot read: {e}") from e

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ConfigError(f"{config_path}: expected a mapping, got {type(loaded).__name__}")

    unknown = set(loaded) - set(DEFAULT_CONFIG)
    if unknown:
        raise ConfigError(f"{config_path}: unknown keys: {', '.join(sorted(unknown))}")

    for key in ('debug_mode', 'collapse_whitespace', 'echo_input'):
        if key in loaded and not isinstance(loaded[key], bool):
            raise ConfigError(f"{config_path}: {key} must be true or false")

    quit_words = loaded.get('quit_words', DEFAULT_CONFIG['quit_words'])
    if not isinstance(quit_words, list) or not all(isinstance(w, str) for w in quit_words):
        # a bare string would turn `line in quit_words` into a substring test
        raise ConfigError(f"{config_path}: quit_words must be a list of strings")

    config.update(loaded)
    return config
