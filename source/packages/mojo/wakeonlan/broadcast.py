"""
.. module:: broadcast
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Module that contains the functions for broadcasting wake-on-lan magic packets.

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

from typing import Optional

import logging
import socket

from mojo.wakeonlan.constants import DEFAULT_BROADCAST_ADDRESS, DEFAULT_WAKEONLAN_PORT
from mojo.wakeonlan.exceptions import NetworkError
from mojo.wakeonlan.macaddress import parse_mac_address
from mojo.wakeonlan.magicpacket import build_magic_packet

logger = logging.getLogger()


def send_magic_packet(payload: bytes, address: str = DEFAULT_BROADCAST_ADDRESS, port: int = DEFAULT_WAKEONLAN_PORT,
    source_addr: Optional[str] = None):
    """
        Sends a magic packet payload as a single UDP broadcast datagram.  Wake-on-lan has
        no acknowledgement so the send is a single attempt and is never retried.

        :param payload: The encoded magic packet.
        :param address: The broadcast address to send the packet to.
        :param port: The UDP port to send the packet to.
        :param source_addr: An optional local IPv4 address to bind the socket to so the packet
                            is sent from a specific interface.

        :raises NetworkError: If the socket cannot be created, configured or the send fails.
    """

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as os_err:
        errmsg = "Failed to create socket: {}".format(os_err)
        raise NetworkError(errmsg, address, port) from os_err

    try:
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        except OSError as os_err:
            errmsg = "Failed to enable broadcast: {}".format(os_err)
            raise NetworkError(errmsg, address, port) from os_err

        if source_addr is not None:
            try:
                sock.bind((source_addr, 0))
            except OSError as os_err:
                errmsg = "Failed to bind socket to {}: {}".format(source_addr, os_err)
                raise NetworkError(errmsg, address, port) from os_err

        logger.debug("Sending %d byte magic packet to %s:%d", len(payload), address, port)

        try:
            sock.sendto(payload, (address, port))
        except OSError as os_err:
            errmsg = "Failed to send packet to {}:{}: {}".format(address, port, os_err)
            raise NetworkError(errmsg, address, port) from os_err
    finally:
        sock.close()

    return


def broadcast_wake_on_lan_magic_message(broadcast_addr: str, mac_addr: str, port: int = DEFAULT_WAKEONLAN_PORT,
    source_addr: Optional[str] = None) -> bytes:
    """
        Parses the MAC address, builds the magic packet for it and broadcasts the packet.
        The MAC address is validated before any socket is created.

        :param broadcast_addr: The broadcast address to send the packet to.
        :param mac_addr: The MAC address of the device to wake up.
        :param port: The UDP port to send the packet to.
        :param source_addr: An optional local IPv4 address to send the packet from.

        :returns: The six bytes of the parsed MAC address.
    """
    mac = parse_mac_address(mac_addr)
    payload = build_magic_packet(mac)
    send_magic_packet(payload, broadcast_addr, port, source_addr=source_addr)
    return mac
