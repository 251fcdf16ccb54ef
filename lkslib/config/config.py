# -*- coding: utf-8 -*-
#
#    LksLib - Python LKS Chain Network Library
#    CONFIG - Configuration settings
#    © 2024 - 2026 October - LksLib Developers
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU Affero General Public License as
#    published by the Free Software Foundation, either version 3 of the
#    License, or (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU Affero General Public License for more details.
#
#    You should have received a copy of the GNU Affero General Public License
#    along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

import os
import configparser
from pathlib import Path

# General defaults
TYPE_TEXT = str
TYPE_INT = int
LOGLEVEL = 'WARNING'


# File locations
LKS_CONFIG_FILE = ''
LKS_INSTALL_DIR = Path(__file__).parents[1]
LKS_DATA_DIR = ''
LKS_LOG_FILE = ''

# Main
ENABLE_LKSLIB_LOGGING = True

# Networks
DEFAULT_NETWORK = 'livenet'
REGTEST_ALIASES = ['local', 'regtest']


def read_config():
    config = configparser.ConfigParser()

    def config_get(section, var, fallback, is_boolean=False):
        try:
            if is_boolean:
                val = config.getboolean(section, var, fallback=fallback)
            else:
                val = config.get(section, var, fallback=fallback)
            return val
        except (configparser.Error, ValueError):
            return fallback

    global LKS_INSTALL_DIR, LKS_DATA_DIR, LKS_CONFIG_FILE
    global LKS_LOG_FILE, LOGLEVEL, ENABLE_LKSLIB_LOGGING
    global DEFAULT_NETWORK

    # Read settings from configuration file provided in OS environment or ~/.lkslib/ directory
    config_file_name = os.environ.get('LKSLIB_CONFIG_FILE')
    if not config_file_name:
        LKS_CONFIG_FILE = Path('~/.lkslib/config.ini').expanduser()
    else:
        LKS_CONFIG_FILE = Path(config_file_name)
        if not LKS_CONFIG_FILE.is_absolute():
            LKS_CONFIG_FILE = Path(Path.home(), '.lkslib', LKS_CONFIG_FILE)
        if not LKS_CONFIG_FILE.exists():
            LKS_CONFIG_FILE = Path(LKS_INSTALL_DIR, 'data', config_file_name)
        if not LKS_CONFIG_FILE.exists():
            raise IOError('LksLib configuration file not found: %s' % str(LKS_CONFIG_FILE))
    data = config.read(str(LKS_CONFIG_FILE))
    LKS_DATA_DIR = Path(config_get('locations', 'data_dir', fallback='~/.lkslib')).expanduser()

    # Log settings
    ENABLE_LKSLIB_LOGGING = config_get("logs", "enable_lkslib_logging", fallback=True, is_boolean=True)
    LKS_LOG_FILE = Path(LKS_DATA_DIR, config_get('logs', 'log_file', fallback='lkslib.log'))
    if ENABLE_LKSLIB_LOGGING:
        LKS_LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    LOGLEVEL = config_get('logs', 'loglevel', fallback=LOGLEVEL)

    # Network settings
    DEFAULT_NETWORK = config_get('common', 'default_network', fallback=DEFAULT_NETWORK)

    if not data:
        return False
    return True


# Initialize library
read_config()
LKSLIB_VERSION = Path(LKS_INSTALL_DIR, 'config/VERSION').open().read().strip()
