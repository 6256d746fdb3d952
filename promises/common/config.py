# -*- coding: utf-8 -*-

"""Manages settings and config file.

Settings are loaded from a configuration file. If they don't exists, default
values are provided.
When an option is set, the config file is updated.

Loading the file is optional: until ``load()`` is called, every entry has its
default value.
"""

import configparser
import logging
import os.path
from . import path as promises_path

_logger = logging.getLogger(__name__)


# Default config dict. Values not present in this dict are not valid.
# Each entry contains the type expected, and the default value. Entries with
# a 'choices' list only accept these values.
_default_config = {
    'debug_mode': {'type': bool, 'default': False},
    'log_levels': {'type': dict, 'default': {}},
    'resettle_policy': {'type': str, 'default': 'ignore',
                        'choices': ('ignore', 'overwrite', 'raise')}
}

# Actual config parser
_config_parser = configparser.ConfigParser()
_config_parser.add_section('config')


def _get_config_file_path():
    return os.path.join(promises_path.get_config_dir(), 'promises.ini')


def load():
    """Find and load the config file."""
    config_file_path = _get_config_file_path()

    if not _config_parser.read(config_file_path):
        _logger.warning('Unable to load config file: %s' % config_file_path)


def get(key):
    """Find and return a configuration entry

    If the entry is not specified in the config file, or if its value is
    invalid, a default value is returned.

    Args:
        key (string): the entry key.
    Returns:
        The corresponding value found.
    Raises:
        KeyError: if the config entry doesn't exists.
    """
    if key not in _default_config:
        raise KeyError(key)
    entry = _default_config[key]
    try:
        if entry['type'] is bool:
            return _config_parser.getboolean('config', key)
        elif entry['type'] is int:
            return _config_parser.getint('config', key)
        elif entry['type'] is dict:
            # Dict entries are in the form 'key=value;key2=value2'
            dict_str = _config_parser.get('config', key)
            result = {}
            for pair in filter(None, dict_str.split(';')):
                try:
                    (k, v) = pair.split('=')
                    result[k.strip()] = v.strip()
                except ValueError:
                    _logger.warning('Unable to parse pair key=value: "%s"'
                                    % pair)
            return result
        else:
            value = _config_parser.get('config', key)
            if 'choices' in entry and value not in entry['choices']:
                _logger.warning('Invalid value "%s" for the config "%s". '
                                'Expected one of %s.',
                                value, key, ', '.join(entry['choices']))
                return entry['default']
            return value
    except configparser.NoOptionError:
        return entry['default']
    except ValueError:
        _logger.warning('Invalid value for the config "%s". Default value '
                        'used instead.', key)
        return entry['default']


def set(key, value):
    """Set a configuration entry.

    Args:
        key (string): the entry key.
        value: the new value to set. It will be converted to string. A None
            value removes the entry, so the default value is used.
    Raises:
        KeyError: if the config entry is not valid.
    """
    if key not in _default_config:
        raise KeyError(key)

    if value is None:
        _config_parser.remove_option('config', key)
    elif isinstance(value, dict):
        _config_parser.set('config', key,
                           ';'.join('%s=%s' % item for item in value.items()))
    else:
        _config_parser.set('config', key, str(value))

    config_file_path = _get_config_file_path()
    try:
        with open(config_file_path, 'w') as config_file:
            _config_parser.write(config_file)
        _logger.debug('Config file modified.')
    except IOError:
        _logger.warning('Unable to write in the config file', exc_info=True)
