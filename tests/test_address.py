"""Tests for hop token parsing."""

import pytest

from sshhop.address import parse_address, parse_port, split_host_port
from sshhop.errors import MalformedAddress
from sshhop.types import Address


class TestParseAddress:
    def test_host_only(self):
        assert parse_address("gw1.example.net") == Address(host="gw1.example.net", port=22)

    def test_host_port(self):
        addr = parse_address("gw1:2222")
        assert addr.host == "gw1"
        assert addr.port == 2222
        assert addr.user is None

    def test_user_host(self):
        addr = parse_address("bastion@gw1.example.net")
        assert addr.user == "bastion"
        assert addr.host == "gw1.example.net"
        assert addr.port == 22

    def test_user_host_port(self):
        assert parse_address("u@gw2:2222") == Address(host="gw2", port=2222, user="u")

    def test_extra_at_is_rejected(self):
        with pytest.raises(MalformedAddress, match="Extra '@' in 'a@b@c:2200'"):
            parse_address("a@b@c:2200")

    def test_comma_in_host_is_rejected(self):
        with pytest.raises(MalformedAddress, match="',' is not allowed"):
            parse_address("gw1,evil")

    def test_comma_in_user_is_rejected(self):
        with pytest.raises(MalformedAddress, match="',' is not allowed"):
            parse_address("ops,root@gw1:2222")

    def test_bracketed_ipv6(self):
        assert parse_address("[fe80::1]:2222") == Address(host="fe80::1", port=2222)
        assert parse_address("root@[::1]") == Address(host="::1", user="root")

    def test_empty_host_after_user(self):
        with pytest.raises(MalformedAddress, match="Host is missing"):
            parse_address("user@:2222")

    def test_port_only(self):
        with pytest.raises(MalformedAddress, match="Host is missing"):
            parse_address(":2222")

    def test_empty_token(self):
        with pytest.raises(MalformedAddress):
            parse_address("")

    def test_empty_user(self):
        with pytest.raises(MalformedAddress, match="User is empty"):
            parse_address("@gw1")

    def test_host_looks_like_option(self):
        with pytest.raises(MalformedAddress, match="may not start with '-'"):
            parse_address("-oProxyCommand=true")

    def test_trailing_colon(self):
        with pytest.raises(MalformedAddress, match="Invalid port"):
            parse_address("gw1:")

    def test_non_numeric_port(self):
        with pytest.raises(MalformedAddress, match="Invalid port 'ssh'"):
            parse_address("gw1:ssh")

    def test_text_after_bracket(self):
        with pytest.raises(MalformedAddress, match="after"):
            parse_address("[::1]x")


class TestParsePort:
    def test_valid(self):
        assert parse_port("1", "x") == 1
        assert parse_port("65535", "x") == 65535

    def test_zero(self):
        with pytest.raises(MalformedAddress, match="out of range"):
            parse_port("0", "gw1:0")

    def test_too_large(self):
        with pytest.raises(MalformedAddress, match="out of range"):
            parse_port("70000", "gw1:70000")

    def test_signs_and_non_ascii_digits(self):
        for text in ["+22", "-22", " 22", "2_2", "２２"]:
            with pytest.raises(MalformedAddress):
                parse_port(text, text)


class TestSplitHostPort:
    def test_with_port(self):
        assert split_host_port("dest.example.net:9000") == ("dest.example.net", 9000)

    def test_default_port(self):
        assert split_host_port("dest.example.net") == ("dest.example.net", 22)

    def test_empty_host(self):
        with pytest.raises(MalformedAddress):
            split_host_port(":9000")


class TestAddressFormatting:
    def test_str_round_trip(self):
        for raw in ["host", "host:2222", "user@host", "user@host:2222", "[::1]:2200"]:
            assert str(parse_address(raw)) == raw

    def test_default_port_is_omitted(self):
        assert str(parse_address("user@host:22")) == "user@host"

    def test_ipv6_without_port_is_bracketed(self):
        assert str(Address(host="fe80::1")) == "[fe80::1]"

    def test_ssh_args(self):
        assert Address(host="gw2", port=2222, user="u").ssh_args() == ["-l", "u", "-p", "2222"]
        assert Address(host="gw1").ssh_args() == []
        assert Address(host="gw1", user="u").ssh_args() == ["-l", "u"]
