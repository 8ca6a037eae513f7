"""
.. module:: cli
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the 'wake-on-lan' command line entry point.

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

from typing import List, Optional

import argparse
import logging
import os
import sys

from mojo.wakeonlan import __version__ as package_version
from mojo.wakeonlan.broadcast import send_magic_packet
from mojo.wakeonlan.constants import (
    DEFAULT_BROADCAST_ADDRESS,
    DEFAULT_WAKEONLAN_PORT,
    ENVIRONMENT_VARIABLE_ADDRESS,
    ENVIRONMENT_VARIABLE_PORT,
    MAX_PORT
)
from mojo.wakeonlan.exceptions import NetworkError, WakeOnLanError
from mojo.wakeonlan.interfaces import get_ipv4_address, get_ipv4_broadcast_address
from mojo.wakeonlan.macaddress import format_mac_address, parse_mac_address
from mojo.wakeonlan.magicpacket import build_magic_packet
from mojo.wakeonlan.resolution import is_ipv4_address

logger = logging.getLogger()

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def port_number(value: str) -> int:
    """
        Argument type for a UDP port number.
    """
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid port number: {!r}".format(value)) from None

    if port < 0 or port > MAX_PORT:
        raise argparse.ArgumentTypeError("port must be between 0 and {}: {}".format(MAX_PORT, port))

    return port


def ipv4_address(value: str) -> str:
    """
        Argument type for an IPv4 broadcast address.
    """
    if not is_ipv4_address(value):
        raise argparse.ArgumentTypeError("invalid IPv4 address: {!r}".format(value))
    return value


def create_parser() -> argparse.ArgumentParser:
    """
        Creates the argument parser for the 'wake-on-lan' command.  The address and port
        defaults can be overridden from the environment; argparse runs string defaults
        through the argument type so bad environment values are reported as usage errors.
    """
    parser = argparse.ArgumentParser(
        prog="wake-on-lan",
        description="Send a Wake-on-LAN magic packet to power on a network device.")
    parser.add_argument("-m", "--mac", required=True,
        help="The MAC address of the device to wake up, e.g. b8:ae:ed:9c:c7:89")

    target_group = parser.add_mutually_exclusive_group()
    target_group.add_argument("-a", "--address", type=ipv4_address,
        default=os.environ.get(ENVIRONMENT_VARIABLE_ADDRESS, DEFAULT_BROADCAST_ADDRESS),
        help="The broadcast address to send the packet to (default: %(default)s)")
    target_group.add_argument("-i", "--interface", default=None,
        help="Send to the broadcast address of this network interface instead of --address")

    parser.add_argument("-p", "--port", type=port_number,
        default=os.environ.get(ENVIRONMENT_VARIABLE_PORT, str(DEFAULT_WAKEONLAN_PORT)),
        help="The UDP port to send the packet to (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version="%(prog)s {}".format(package_version))

    return parser


def resolve_interface_target(ifname: str):
    """
        Returns the (broadcast address, source address) pair for the interface.
    """
    broadcast_addr = get_ipv4_broadcast_address(ifname)
    if broadcast_addr is None:
        errmsg = "No IPv4 broadcast address found for interface={}".format(ifname)
        raise NetworkError(errmsg)

    source_addr = get_ipv4_address(ifname)
    logger.debug("Interface %s resolved to broadcast=%s source=%s", ifname, broadcast_addr, source_addr)

    return broadcast_addr, source_addr


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, stream=sys.stderr, format="%(levelname)s: %(message)s")

    try:
        mac = parse_mac_address(args.mac)
        payload = build_magic_packet(mac)

        address = args.address
        source_addr = None
        if args.interface is not None:
            address, source_addr = resolve_interface_target(args.interface)

        send_magic_packet(payload, address, args.port, source_addr=source_addr)
    except WakeOnLanError as wol_err:
        print("Error: {}".format(wol_err), file=sys.stderr)
        return EXIT_FAILURE

    print("Wake up packet sent to {}".format(format_mac_address(mac)))

    return EXIT_SUCCESS
