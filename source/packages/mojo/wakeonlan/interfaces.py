"""
.. module:: interfaces
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for finding the addresses of network interfaces
               that wake-on-lan packets can be broadcast from.

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

from typing import Dict, List, Union

import netifaces

from mojo.wakeonlan.exceptions import NetworkError


def _get_ipv4_address_table(ifname: str) -> List[Dict[str, str]]:
    try:
        address_info = netifaces.ifaddresses(ifname)
    except ValueError as verr:
        errmsg = "Unknown network interface. ifname={}".format(ifname)
        raise NetworkError(errmsg) from verr

    addr_table = []
    if address_info is not None and netifaces.AF_INET in address_info:
        addr_table = address_info[netifaces.AF_INET]

    return addr_table


def get_ipv4_address(ifname: str) -> Union[str, None]:
    """
        Get the first IPv4 address associated with the specified interface name.

        :param ifname: The interface name to lookup the IP address for.

        :returns: The IPv4 address associated with the specified interface name or None
    """
    addr = None

    for addr_info in _get_ipv4_address_table(ifname):
        if "addr" in addr_info:
            addr = addr_info["addr"]
            break

    return addr


def get_ipv4_broadcast_address(ifname: str) -> Union[str, None]:
    """
        Get the first IPv4 broadcast address associated with the specified interface name.
        An interface can have more than one address or none at all, so the first address
        entry that carries a broadcast address wins.

        :param ifname: The interface name to lookup the broadcast address for.

        :returns: The IPv4 broadcast address of the specified interface or None
    """
    bcast_addr = None

    for addr_info in _get_ipv4_address_table(ifname):
        if "broadcast" in addr_info:
            bcast_addr = addr_info["broadcast"]
            break

    return bcast_addr
