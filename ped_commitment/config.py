"""
Configuration
=============

Defaults for the commitment protocol, read from the environment.

Environment variables:
- PEDCOM_CURVE: pairing curve whose G1 is used as the commitment group
- PEDCOM_ALLOW_RECOMMIT: whether a verifier accepts a second commitment
- PEDCOM_GENERATOR_SEED: public seed hashed onto G1 to fix the generator G
- PEDCOM_NUMS_SEED: public seed for the trapdoor-free public key mode
- PEDCOM_LOG_LEVEL: level installed by configure_logging()
"""

import logging
import os

_TRUE_VALUES = ('1', 'true', 'yes', 'on')

# Defaults, overridden by the PEDCOM_* environment variables
DEFAULT_PAIRING_CURVE = 'MNT224'
DEFAULT_ALLOW_RECOMMIT = True
DEFAULT_GENERATOR_SEED = 'ped_commitment/G'
DEFAULT_NUMS_SEED = 'ped_commitment/H'
DEFAULT_LOG_LEVEL = 'WARNING'

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def parse_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


class Config:
    """Runtime configuration."""

    def __init__(self):
        self.pairing_curve = DEFAULT_PAIRING_CURVE
        self.allow_recommit = DEFAULT_ALLOW_RECOMMIT
        self.generator_seed = DEFAULT_GENERATOR_SEED
        self.nums_seed = DEFAULT_NUMS_SEED
        self.log_level = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ=None) -> 'Config':
        """Build a Config from a mapping of environment variables (os.environ by default)."""
        environ = os.environ if environ is None else environ
        cfg = cls()
        cfg.pairing_curve = environ.get('PEDCOM_CURVE', cfg.pairing_curve)
        if 'PEDCOM_ALLOW_RECOMMIT' in environ:
            cfg.allow_recommit = parse_bool(environ['PEDCOM_ALLOW_RECOMMIT'])
        cfg.generator_seed = environ.get('PEDCOM_GENERATOR_SEED', cfg.generator_seed)
        cfg.nums_seed = environ.get('PEDCOM_NUMS_SEED', cfg.nums_seed)
        cfg.log_level = environ.get('PEDCOM_LOG_LEVEL', cfg.log_level)
        return cfg


def resolve_log_level(level) -> int:
    """Turn a level name (any case) or number into a logging level number."""
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    if isinstance(level, str):
        number = logging.getLevelName(level.strip().upper())
        if isinstance(number, int):
            return number
    raise ValueError(f"Unknown log level {level!r}")


def configure_logging(level=None):
    """
    Install a basic stderr handler for the ped_commitment loggers.

    The library itself only creates module loggers; applications and
    scripts call this once at start-up.
    """
    level = resolve_log_level(config.log_level if level is None else level)
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger('ped_commitment').setLevel(level)


# Global configuration instance
config = Config.from_env()
