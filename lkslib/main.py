# -*- coding: utf-8 -*-
#
#    LksLib - Python LKS Chain Network Library
#    MAIN - Load configs and initialize logging
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

# Do not remove any of the imports below, used by other files
import os
import sys
import logging
from logging.handlers import RotatingFileHandler
from lkslib.config.config import *


# Initialize logging
logger = logging.getLogger('lkslib')
logger.setLevel(LOGLEVEL)

if ENABLE_LKSLIB_LOGGING:
    handler = RotatingFileHandler(str(LKS_LOG_FILE), maxBytes=100 * 1024 * 1024, backupCount=2)
    formatter = logging.Formatter('%(asctime)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s',
                                  datefmt='%Y/%m/%d %H:%M:%S')
    handler.setFormatter(formatter)
    handler.setLevel(LOGLEVEL)
    logger.addHandler(handler)

    logger.info('WELCOME TO LKSLIB - LKS CHAIN NETWORK LIBRARY')
    logger.info('Version: %s' % LKSLIB_VERSION)
    logger.info('Read config from: %s' % LKS_CONFIG_FILE)
    logger.info('Logging to: %s' % LKS_LOG_FILE)
    logger.info('Default network: %s' % DEFAULT_NETWORK)


def define_immutable(obj, values):
    """
    Attach attributes to an object which can not be reassigned or deleted afterwards.

    The object's class must check the names listed in '_immutable_fields' when setting or deleting attributes,
    see the Network class for an example.

    :param obj: Object to attach the attributes to
    :type obj: object
    :param values: Attribute names and values
    :type values: dict

    :return object: The same object
    """
    immutable = obj.__dict__.get('_immutable_fields', frozenset(['_immutable_fields']))
    for name in values:
        if name in immutable:
            raise AttributeError("Can not redefine immutable attribute '%s'" % name)
    for name, value in values.items():
        object.__setattr__(obj, name, value)
    object.__setattr__(obj, '_immutable_fields', immutable | frozenset(values))
    return obj
