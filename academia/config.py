"""Configuration helpers."""

import json
import logging
import os

from .core.exceptions import ConfigurationError


DEFAULT_CONFIG = {
    'log_level': 'WARNING',
    'rest_host': '127.0.0.1',
    'rest_port': 8000,
    'seed_demo_data': False,
}


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _normalize_log_level(value):
    # WARN and FATAL map to WARNING and CRITICAL
    level = logging.getLevelName(value.upper()) if isinstance(value, str) else None
    name = logging.getLevelName(level) if isinstance(level, int) else None
    if name not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level: {value!r}", details={'key': 'log_level'})
    return name


def load_config(path=None, overrides=None):
    """
    Build the runtime configuration.

    Values from the JSON file at ``path`` are merged over ``DEFAULT_CONFIG``,
    then non-None ``overrides`` (usually command-line flags) are applied.
    """
    config = dict(DEFAULT_CONFIG)

    if path:
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not read configuration file {path}: {e}")
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        unknown = sorted(set(data) - set(DEFAULT_CONFIG))
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}",
                                     details={'keys': unknown})
        config.update(data)

    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value

    config['log_level'] = _normalize_log_level(config['log_level'])
    if not isinstance(config['rest_port'], int) or not 0 < config['rest_port'] < 65536:
        raise ConfigurationError(f"Invalid REST port: {config['rest_port']!r}",
                                 details={'key': 'rest_port'})
    return config
