"""
.. module:: macaddress
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for parsing and formatting hardware (MAC) addresses.

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

from mojo.wakeonlan.constants import MAC_ADDRESS_LENGTH, REGEX_MAC_BARE, REGEX_MAC_SEPARATED
from mojo.wakeonlan.exceptions import InvalidMacAddress


def parse_mac_address(mac_addr: str) -> bytes:
    """
        Parses a MAC address string into its six octets.

        The accepted forms are 'xx:xx:xx:xx:xx:xx', 'xx-xx-xx-xx-xx-xx' and 'xxxxxxxxxxxx'.
        Hex digits can be upper or lower case but each octet must be two digits and a
        separated address must use the same separator throughout.

        :param mac_addr: The MAC address string to parse.

        :returns: The six bytes of the MAC address.

        :raises InvalidMacAddress: If the string is not a MAC address in one of the accepted forms.
    """
    if not isinstance(mac_addr, str):
        errmsg = "Invalid MAC address, expected a string. mac_addr={!r}".format(mac_addr)
        raise InvalidMacAddress(errmsg, mac_addr)

    candidate = mac_addr.strip()

    mobj = REGEX_MAC_SEPARATED.match(candidate)
    if mobj is not None:
        sep = mobj.group(1)
        candidate = candidate.replace(sep, "")
    elif REGEX_MAC_BARE.match(candidate) is None:
        errmsg = "Invalid MAC address format. mac_addr={!r}".format(mac_addr)
        raise InvalidMacAddress(errmsg, mac_addr)

    return bytes.fromhex(candidate)


def format_mac_address(mac: bytes, sep: str = ":") -> str:
    """
        Formats the six octets of a MAC address as lower case hex separated by `sep`.
    """
    if len(mac) != MAC_ADDRESS_LENGTH:
        errmsg = "Invalid MAC address, expected {} bytes but got {}.".format(MAC_ADDRESS_LENGTH, len(mac))
        raise InvalidMacAddress(errmsg, mac)

    return sep.join(["{:02x}".format(octet) for octet in mac])
