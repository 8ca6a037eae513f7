
import unittest

from unittest import mock

import netifaces

from mojo.wakeonlan.exceptions import NetworkError
from mojo.wakeonlan.interfaces import get_ipv4_address, get_ipv4_broadcast_address

ETH0_ADDRESSES = {
    netifaces.AF_INET: [
        { "addr": "192.168.1.20", "netmask": "255.255.255.0", "broadcast": "192.168.1.255" }
    ]
}

TUN0_ADDRESSES = {
    netifaces.AF_INET: [
        { "addr": "10.8.0.2", "netmask": "255.255.255.255", "peer": "10.8.0.1" }
    ]
}


class TestInterfaceAddresses(unittest.TestCase):

    @mock.patch.object(netifaces, "ifaddresses", return_value=ETH0_ADDRESSES)
    def test_get_ipv4_address(self, ifaddresses_mock):
        assert get_ipv4_address("eth0") == "192.168.1.20"
        ifaddresses_mock.assert_called_once_with("eth0")
        return

    @mock.patch.object(netifaces, "ifaddresses", return_value=ETH0_ADDRESSES)
    def test_get_ipv4_broadcast_address(self, ifaddresses_mock):
        assert get_ipv4_broadcast_address("eth0") == "192.168.1.255"
        return

    @mock.patch.object(netifaces, "ifaddresses", return_value=TUN0_ADDRESSES)
    def test_point_to_point_has_no_broadcast(self, ifaddresses_mock):
        assert get_ipv4_broadcast_address("tun0") is None
        assert get_ipv4_address("tun0") == "10.8.0.2"
        return

    @mock.patch.object(netifaces, "ifaddresses", return_value={})
    def test_interface_without_ipv4(self, ifaddresses_mock):
        assert get_ipv4_address("eth1") is None
        assert get_ipv4_broadcast_address("eth1") is None
        return

    @mock.patch.object(netifaces, "ifaddresses", side_effect=ValueError("You must specify a valid interface name."))
    def test_unknown_interface(self, ifaddresses_mock):
        self.assertRaises(NetworkError, get_ipv4_broadcast_address, "nosuch0")
        return


if __name__ == '__main__':
    unittest.main()
