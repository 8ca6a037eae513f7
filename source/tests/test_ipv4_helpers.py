
import unittest

from mojo.wakeonlan.resolution import is_ipv4_address


class TestIpv4HelpersPositive(unittest.TestCase):

    def test_is_ipv4_address_limited_broadcast(self):
        candidate = "255.255.255.255"
        result = is_ipv4_address(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv4_address_subnet_broadcast(self):
        candidate = "192.168.1.255"
        result = is_ipv4_address(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv4_address_min(self):
        candidate = "0.0.0.0"
        result = is_ipv4_address(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return


class TestIpv4HelpersNegative(unittest.TestCase):

    def test_is_ipv4_address_plus_one(self):
        candidate = "256.256.256.256"
        result = is_ipv4_address(candidate)
        assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv4_address_too_few_groups(self):
        candidate = "192.168.1"
        result = is_ipv4_address(candidate)
        assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv4_address_hostname(self):
        candidate = "broadcast.local"
        result = is_ipv4_address(candidate)
        assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv4_address_ipv6(self):
        candidate = "ff02::1"
        result = is_ipv4_address(candidate)
        assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return


if __name__ == '__main__':
    unittest.main()
