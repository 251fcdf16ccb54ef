# -*- coding: utf-8 -*-
#
#    LksLib - Python LKS Chain Network Library
#    Network Definitions
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

# Network, address prefixes, wif, extended key versions (BIP32 and 256 bit DIP14), magic, port and seeds
NETWORK_LIVENET = 'livenet'
NETWORK_TESTNET = 'testnet'

NETWORK_FIELDS = ['name', 'alias', 'pubkeyhash', 'privatekey', 'scripthash', 'xpubkey', 'xprivkey',
                  'xpubkey256bit', 'xprivkey256bit']
NETWORK_OPTIONAL_FIELDS = ['network_magic', 'port', 'dns_seeds']

NETWORKS = {
    NETWORK_LIVENET: {
        'name': NETWORK_LIVENET,
        'alias': 'mainnet',
        'pubkeyhash': 0x4c,
        'privatekey': 0xcc,
        'scripthash': 0x10,
        'xpubkey': 0x0488b21e,          # 'xpub'
        'xprivkey': 0x0488ade4,         # 'xprv'
        'xpubkey256bit': 0x0eecefc5,    # 'dpmp'
        'xprivkey256bit': 0x0eecf02e,   # 'dpms'
        'network_magic': 0xbf0c6bbd,
        'port': 9400,
        'dns_seeds': [
            'www.lkschain.io',
            '5.189.170.226',
            '159.203.17.166',
        ],
    },
    # Port, magic and seeds depend on regtest mode, see TESTNET_PARAMS and REGTEST_PARAMS
    NETWORK_TESTNET: {
        'name': NETWORK_TESTNET,
        'alias': ['regtest', 'devnet', 'evonet', 'local'],
        'pubkeyhash': 0x8c,
        'privatekey': 0xef,
        'scripthash': 0x13,
        'xpubkey': 0x043587cf,          # 'tpub'
        'xprivkey': 0x04358394,         # 'tprv'
        'xpubkey256bit': 0x0eed270b,    # 'dptp'
        'xprivkey256bit': 0x0eed2774,   # 'dpts'
    },
}

TESTNET_PARAMS = {
    'port': 19400,
    'network_magic': 0xcee2caff,
    'dns_seeds': [
        'fork.lkschain.io',
        '159.65.73.24',
    ],
}

REGTEST_PARAMS = {
    'port': 19899,
    'network_magic': 0xfcc1b7dc,
    'dns_seeds': [],
}
