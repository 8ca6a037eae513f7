"""
.. module:: magicpacket
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the function that encodes the wake-on-lan magic packet.

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

import logging

from mojo.wakeonlan.constants import MAGIC_PACKET_HEADER, MAGIC_PACKET_MAC_REPEAT

logger = logging.getLogger()


def build_magic_packet(mac: bytes) -> bytes:
    '[FF FF FF FF FF FF] + [mac] * 16   ( len 102 bytes )'
    packet = MAGIC_PACKET_HEADER + bytes(mac) * MAGIC_PACKET_MAC_REPEAT
    logger.debug("Built magic packet of %d bytes for mac=%s", len(packet), bytes(mac).hex())
    return packet
