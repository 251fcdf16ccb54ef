# -*- coding: utf-8 -*-
#
#    LksLib - Python LKS Chain Network Library
#    ENCODING - Methods for encoding and conversion
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
from lkslib.main import *
_logger = logging.getLogger(__name__)


class EncodingError(Exception):
    """ Log and raise encoding errors """
    def __init__(self, msg=''):
        self.msg = msg

    def __str__(self):
        return self.msg


def integer_as_buffer(integer, length=4):
    """
    Convert unsigned integer to a big-endian byte buffer. Used to encode network magic numbers.

    >>> integer_as_buffer(0xbf0c6bbd).hex()
    'bf0c6bbd'

    :param integer: Integer to convert
    :type integer: int
    :param length: Number of bytes of the result, default is 4 bytes for a 32 bit integer
    :type length: int

    :return bytes:
    """
    if not isinstance(integer, numbers.Integral) or isinstance(integer, bool):
        raise EncodingError("Input must be an integer, not %s" % type(integer).__name__)
    if integer < 0 or integer >= 1 << (8 * length):
        raise EncodingError("Integer %d does not fit in %d unsigned bytes" % (integer, length))
    return int(integer).to_bytes(length, 'big')


def to_hexstring(string):
    """
    Convert bytes, string to a hexadecimal string. Use instead of built-in hex() method if format
    of input string is not known.

    >>> to_hexstring(b'\\x12\\xaa\\xdd')
    '12aadd'

    :param string: Variable to convert to hex string
    :type string: bytes, str

    :return: hexstring
    """
    if not string:
        return ''
    try:
        bytes.fromhex(string)
        return string
    except (ValueError, TypeError):
        pass

    if not isinstance(string, bytes):
        string = bytes(string, 'utf8')
    return string.hex()
