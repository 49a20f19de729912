import configparser
import logging

from symtab.frequency import IMPLEMENTATIONS


_DEFAULTS = {
    'frequency': {
        'implementation': 'redblack',
        'min_length': '1',
        'check_invariants': 'no',
    },
    'logging': {
        'level': 'WARNING',
    },
}


class Config:
    def __init__(self, config):
        self.frequency = ConfigFrequency(config['frequency'])
        self.logging = ConfigLogging(config['logging'])


class ConfigFrequency:
    def __init__(self, config_frequency):
        self.implementation = config_frequency['implementation']
        if self.implementation not in IMPLEMENTATIONS:
            raise ValueError('invalid implementation')
        self.min_length = int(config_frequency['min_length'])
        if self.min_length < 0:
            raise ValueError('invalid min_length')
        self.check_invariants = _config_boolean(config_frequency['check_invariants'])


class ConfigLogging:
    def __init__(self, config_logging):
        level = logging.getLevelName(config_logging['level'].upper())
        if not isinstance(level, int):
            raise ValueError('invalid logging level')
        self.level = level


def parse_config(f=None):
    """
    Parse the configuration from the given file. Options that are missing
    from the file (or all of them, if no file is given) take their default
    values.
    """
    config = configparser.ConfigParser()
    config.read_dict(_DEFAULTS)
    if f is not None:
        config.read_file(f)
    return Config(config)


def _config_boolean(value):
    if value in ['yes', 'on', 'true', '1']:
        return True
    elif value in ['no', 'off', 'false', '0']:
        return False
    else:
        raise ValueError('invalid boolean')
