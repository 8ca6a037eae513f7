"""
.. module:: exceptions
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains exceptions that can be raised for invalid hardware addresses and
               network failures encountered while sending wake-on-lan packets.

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


class WakeOnLanError(RuntimeError):
    """
        This error is the base error for all wake-on-lan errors.
    """


class InvalidMacAddress(WakeOnLanError, ValueError):
    """
        This error is raised when a MAC address is not exactly six octets of valid hex.
    """
    def __init__(self, message, mac_addr, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.mac_addr = mac_addr
        return


class NetworkError(WakeOnLanError):
    """
        This error is raised when a socket cannot be created, configured or used to send
        a magic packet.
    """
    def __init__(self, message, address: Optional[str] = None, port: Optional[int] = None, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.address = address
        self.port = port
        return
