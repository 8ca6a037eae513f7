"""
.. module:: constants
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the constants that are used in association with Wake-on-LAN.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
__version__ = "1.0.0"
__maintainer__ = "Myron Walker"
__email__ = "myron.walker@gmail.com"
__status__ = "Development" # Prototype, Development or Production
__license__ = "MIT"

import re

MAC_ADDRESS_LENGTH = 6

MAGIC_PACKET_HEADER = b"\xff" * 6
MAGIC_PACKET_MAC_REPEAT = 16
MAGIC_PACKET_LENGTH = len(MAGIC_PACKET_HEADER) + (MAC_ADDRESS_LENGTH * MAGIC_PACKET_MAC_REPEAT)

DEFAULT_BROADCAST_ADDRESS = "255.255.255.255"
DEFAULT_WAKEONLAN_PORT = 9

MAX_PORT = 65535

ENVIRONMENT_VARIABLE_ADDRESS = "MJR_WAKEONLAN_ADDRESS"
ENVIRONMENT_VARIABLE_PORT = "MJR_WAKEONLAN_PORT"

# Two hex digits per octet, one consistent separator (':' or '-') or none at all.
REGEX_MAC_SEPARATED = re.compile(r"^[0-9a-fA-F]{2}([:-])[0-9a-fA-F]{2}(?:\1[0-9a-fA-F]{2}){4}$")
REGEX_MAC_BARE = re.compile(r"^[0-9a-fA-F]{12}$")

REGEX_IPV4_COMPONENTS = re.compile(r"^([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})$")
