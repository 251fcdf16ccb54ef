# -*- coding: utf-8 -*-
#
#    LksLib - Python LKS Chain Network Library
#    NETWORKS - Registry of network definitions with lookup helpers and regtest mode
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

import numbers
from types import MappingProxyType
from lkslib.encoding import *
from lkslib.config.networks import *


_logger = logging.getLogger(__name__)

# Registered networks in order of registration, and index of every distinguishing value to its network
networks = []
network_maps = {}


class NetworkError(Exception):
    """
    Network Exception class
    """
    def __init__(self, msg=''):
        self.msg = msg
        _logger.error(msg)

    def __str__(self):
        return self.msg


class Network(object):
    """
    Network class with the prefixes and parameters of a network.

    Address and WIF prefixes, BIP32 and 256 bit extended key versions, the network magic, default port and
    DNS seeds. Fields are immutable once the network is created with the add_network method.

    Port, network magic and DNS seeds are read through properties, so a network can switch between two sets
    of values. This is used for testnet, which returns the regtest values when regtest is enabled. Only a
    network with mode values has the mutable regtest_enabled flag.
    """

    _mode_values = None

    def __setattr__(self, name, value):
        if name in self.__dict__.get('_immutable_fields', ()):
            raise AttributeError("Network attribute '%s' is immutable" % name)
        object.__setattr__(self, name, value)

    def __delattr__(self, name):
        if name in self.__dict__.get('_immutable_fields', ()):
            raise AttributeError("Network attribute '%s' is immutable" % name)
        object.__delattr__(self, name)

    def __str__(self):
        return str(getattr(self, 'name', None))

    def __repr__(self):
        return "<Network: %s>" % getattr(self, 'name', None)

    def __eq__(self, other):
        if isinstance(other, str):
            return getattr(self, 'name', None) == other
        if isinstance(other, Network):
            return getattr(self, 'name', None) == getattr(other, 'name', None)
        return False

    def __hash__(self):
        return hash(getattr(self, 'name', None))

    def _value(self, field):
        if self._mode_values is not None:
            return self._mode_values[bool(self.__dict__.get('regtest_enabled'))][field]
        return self.__dict__.get('_' + field)

    @property
    def port(self):
        return self._value('port')

    @property
    def network_magic(self):
        return self._value('network_magic')

    @property
    def dns_seeds(self):
        return self._value('dns_seeds')

    def set_mode_values(self, normal, regtest):
        """
        Attach port, network magic and DNS seeds for normal and regtest mode and add the regtest_enabled flag,
        disabled by default. The values returned by the properties depend on this flag from then on.

        Can only be called once per network.

        :param normal: Dictionary with 'port', 'network_magic' (integer) and 'dns_seeds' used when regtest is disabled
        :type normal: dict
        :param regtest: Dictionary with the same keys, used when regtest is enabled
        :type regtest: dict
        """
        if self._mode_values is not None:
            raise NetworkError("Mode values for network %s are already defined" % self.name)
        mode_values = []
        for values in [normal, regtest]:
            mode_values.append(MappingProxyType({
                'port': values.get('port'),
                'network_magic': integer_as_buffer(values['network_magic'])
                if values.get('network_magic') else None,
                'dns_seeds': tuple(values.get('dns_seeds') or ()),
            }))
        define_immutable(self, {'_mode_values': tuple(mode_values)})
        self.regtest_enabled = False

    def fields(self):
        """
        Names and values of all network fields, excluding the regtest_enabled flag.

        :return list: List of (name, value) tuples
        """
        return [(f, getattr(self, f, None)) for f in NETWORK_FIELDS + NETWORK_OPTIONAL_FIELDS]

    def as_dict(self):
        """
        Network fields as dictionary, with network magic as hexadecimal string. Includes the regtest_enabled
        flag for networks with regtest mode.

        >>> livenet.as_dict()['network_magic']
        'bf0c6bbd'

        :return dict:
        """
        nd = dict(self.fields())
        nd['network_magic'] = to_hexstring(self.network_magic) if self.network_magic else None
        if 'regtest_enabled' in self.__dict__:
            nd['regtest_enabled'] = self.regtest_enabled
        return nd


def _index_network(network, values):
    for value in values:
        if value is None:
            continue
        if isinstance(value, (str, numbers.Number)):
            network_maps[value] = network
        elif isinstance(value, (list, tuple)):
            for v in value:
                network_maps[v] = network


def add_network(data=None, **kwargs):
    """
    Create a new network and add it to the registry.

    Every string and number value of the network and every item of the alias and DNS seed lists can be used
    to retrieve the network with get_network. If another network already uses a value it is overwritten.

    >>> nw = add_network({'name': 'customnet', 'alias': 'cnet', 'pubkeyhash': 0x1c, 'privatekey': 0x9c,
    ...                   'scripthash': 0x3c, 'xpubkey': 0x0488b21f, 'xprivkey': 0x0488ade5,
    ...                   'xpubkey256bit': 0x0eecefc6, 'xprivkey256bit': 0x0eecf02f, 'port': 29400})
    >>> get_network('cnet') is nw
    True
    >>> remove_network(nw)

    :param data: Dictionary with name, alias, pubkeyhash, privatekey, scripthash, xpubkey, xprivkey, xpubkey256bit, xprivkey256bit and optional network_magic (integer), port and dns_seeds
    :type data: dict
    :param kwargs: Network fields, update the values in data

    :return Network:
    """
    data = dict(data or {}, **kwargs)
    network = Network()

    alias = data.get('alias')
    if isinstance(alias, list):
        alias = tuple(alias)
    values = {f: data.get(f) for f in NETWORK_FIELDS}
    values['alias'] = alias
    define_immutable(network, values)

    if data.get('network_magic'):
        define_immutable(network, {'_network_magic': integer_as_buffer(data['network_magic'])})
    if data.get('port'):
        define_immutable(network, {'_port': data['port']})
    if data.get('dns_seeds') is not None:
        define_immutable(network, {'_dns_seeds': tuple(data['dns_seeds'])})

    _index_network(network, [v for _, v in network.fields()])
    networks.append(network)
    _logger.info("Added network %s" % network.name)
    return network


def remove_network(network):
    """
    Remove network from the registry, including all values which refer to this network.

    Nothing happens if the network is not registered.

    :param network: Network to remove
    :type network: Network
    """
    count = len(networks)
    networks[:] = [nw for nw in networks if nw is not network]
    for key in [k for k, nw in network_maps.items() if nw is network]:
        del network_maps[key]
    if len(networks) != count:
        _logger.info("Removed network %s" % network.name)


def get_network(arg, keys=None):
    """
    Retrieve network by name, alias, prefix, extended key version, port or DNS seed.

    >>> get_network('mainnet')
    <Network: livenet>
    >>> get_network(0x8c)
    <Network: testnet>

    Values are matched with their own type, numbers are not converted to strings

    >>> get_network(9400)
    <Network: livenet>
    >>> get_network('9400') is None
    True

    If keys are specified only these fields of the registered networks are compared with arg. An empty list
    of keys matches nothing.

    >>> get_network('mainnet', 'name') is None
    True

    Retrieving testnet by its 'local' or 'regtest' alias without keys enables regtest mode.

    :param arg: Network, or string or number value of a network
    :type arg: Network, str, int
    :param keys: Field name or list of field names to compare with. Leave empty to search all values
    :type keys: str, list

    :return Network: The network found or None
    """
    if any(arg is nw for nw in networks):
        return arg
    if keys is not None:
        if isinstance(keys, str):
            keys = [keys]
        for nw in networks:
            if any(getattr(nw, key, None) == arg for key in keys):
                return nw
        return None

    try:
        network = network_maps.get(arg)
    except TypeError:
        return None

    if network is not None and network is testnet and isinstance(arg, str) and arg in REGTEST_ALIASES:
        enable_regtest()
    return network


def enable_regtest():
    """
    Enable regtest mode: testnet returns the regtest port, network magic and DNS seeds
    """
    testnet.regtest_enabled = True
    _logger.debug("Regtest mode enabled for %s" % testnet.name)


def disable_regtest():
    """
    Disable regtest mode: testnet returns its own port, network magic and DNS seeds
    """
    testnet.regtest_enabled = False
    _logger.debug("Regtest mode disabled for %s" % testnet.name)


def network_values_for(field):
    """
    Return values of field for all registered networks, i.e.: pubkeyhash, port, etc

    >>> network_values_for('pubkeyhash')
    [76, 140]

    :param field: Field name of a Network
    :type field: str

    :return list:
    """
    return [getattr(nw, field, None) for nw in networks]


def network_by_value(field, value):
    """
    Return names of all registered networks with this value for field.

    >>> network_by_value('scripthash', 0x13)
    ['testnet']

    :param field: Field name of a Network
    :type field: str
    :param value: Value to search for
    :type value: str, int, bytes

    :return list: Of network name strings
    """
    return [nw.name for nw in networks if getattr(nw, field, None) == value]


def network_defined(network):
    """
    Is network defined?

    >>> network_defined('livenet')
    True
    >>> network_defined('mainnet')
    False

    :param network: Network name or Network object
    :type network: str, Network

    :return bool:
    """
    name = network.name if isinstance(network, Network) else network
    return any(nw.name == name for nw in networks)


# Public interface
add = add_network
remove = remove_network
get = get_network

# Built-in networks
testnet = None
add_network(NETWORKS[NETWORK_LIVENET])
livenet = get_network(NETWORK_LIVENET)
mainnet = livenet

add_network(NETWORKS[NETWORK_TESTNET])
testnet = get_network(NETWORK_TESTNET)
testnet.set_mode_values(TESTNET_PARAMS, REGTEST_PARAMS)
_index_network(testnet, [TESTNET_PARAMS['port'], REGTEST_PARAMS['port']])

default_network = get_network(DEFAULT_NETWORK)
if default_network is None:
    raise NetworkError("Network %s not found in network definitions" % DEFAULT_NETWORK)
