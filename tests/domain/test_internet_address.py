"""Tests for the InternetAddress entity, run against both storage backends."""

import copy
import socket

import pytest

from inetaddr import (
    INVALID_IP,
    INVALID_PORT,
    LOCAL_IP,
    MAX_VALID_PORT,
    MIN_VALID_PORT,
    Address,
    AddressFamily,
    InternetAddress,
)


def test_default_constructor_is_cleared(backend):
    addr = InternetAddress(backend=backend)
    assert addr.get_ip() == ""
    assert addr.get_port() == INVALID_PORT
    assert not addr.is_valid()
    assert not addr.has_valid_ip()
    assert not addr.has_valid_port()
    assert addr.family() is AddressFamily.UNKNOWN


def test_address_alias():
    assert Address is InternetAddress


@pytest.mark.parametrize(
    "ip, expected",
    [
        ("192.0.2.1", AddressFamily.IPV4),
        ("2001:db8::1", AddressFamily.IPV6),
        ("not-an-ip", AddressFamily.UNKNOWN),
        ("", AddressFamily.UNKNOWN),
        ("0:0:0:0:0:0:0:1", AddressFamily.IPV6),
    ],
)
def test_family(backend, ip, expected):
    assert InternetAddress(ip, 8080, backend=backend).family() is expected


class TestValidity:
    """The four ip/port validity combinations for each family."""

    @pytest.mark.parametrize("valid_ip", ["192.0.2.1", "2001:db8::1"])
    def test_valid_address(self, backend, valid_ip):
        addr = InternetAddress(valid_ip, 8080, backend=backend)
        assert addr.is_valid()
        assert addr.has_valid_ip()
        assert addr.has_valid_port()

    @pytest.mark.parametrize("bad_ip", ["192.0.2.256", "2001:db8:::1"])
    def test_invalid_ip(self, backend, bad_ip):
        addr = InternetAddress(bad_ip, 8080, backend=backend)
        assert not addr.is_valid()
        assert not addr.has_valid_ip()
        assert addr.has_valid_port()
        assert addr.family() is AddressFamily.UNKNOWN

    def test_invalid_port(self, backend):
        addr = InternetAddress("10.0.0.1", 80, backend=backend)
        assert not addr.is_valid()
        assert addr.has_valid_ip()
        assert not addr.has_valid_port()
        assert addr.family() is AddressFamily.IPV4

    def test_invalid_both(self, backend):
        addr = InternetAddress("bad", -1, backend=backend)
        assert not addr.is_valid()
        assert not addr.has_valid_ip()
        assert not addr.has_valid_port()

    def test_port_bounds(self, backend):
        addr = InternetAddress(LOCAL_IP, MIN_VALID_PORT, backend=backend)
        assert addr.is_valid()
        addr.set_port(MAX_VALID_PORT)
        assert addr.is_valid()
        addr.set_port(MIN_VALID_PORT - 1)
        assert not addr.is_valid()
        addr.set_port(MAX_VALID_PORT + 1)
        assert not addr.is_valid()


@pytest.mark.parametrize(
    "ip, port",
    [
        ("192.0.2.1", 8080),
        ("2001:db8::1", 0),
        ("0:0:0:0:0:0:0:1", 1024),
        ("garbage text", -12345),
        ("", 70000),
    ],
)
def test_set_get_round_trip(backend, ip, port):
    addr = InternetAddress(ip, port, backend=backend)
    assert addr.get_ip() == ip
    assert addr.get_port() == port


def test_setters_replace_fields(backend):
    addr = InternetAddress("192.0.2.1", 8080, backend=backend)
    addr.set_ip("2001:db8::2")
    assert addr.get_ip() == "2001:db8::2"
    assert addr.family() is AddressFamily.IPV6

    addr.set_port(9000)
    assert addr.get_port() == 9000

    addr.set_ip("nope")
    assert addr.family() is AddressFamily.UNKNOWN
    assert addr.get_port() == 9000


def test_properties(backend):
    addr = InternetAddress(backend=backend)
    addr.ip = "::1"
    addr.port = 5000
    assert (addr.ip, addr.port) == ("::1", 5000)
    assert addr.backend == backend


def test_setters_never_raise(backend):
    addr = InternetAddress(backend=backend)
    addr.set_ip(None)
    addr.set_port(-99999)
    assert addr.family() is AddressFamily.UNKNOWN
    assert not addr.is_valid()
    assert addr.to_string() == "Invalid_IP(None):Invalid_Port(-99999)"


def test_clear(backend):
    addr = InternetAddress("192.0.2.1", 8080, backend=backend)
    addr.clear()
    assert addr == InternetAddress(backend=backend)
    assert not addr.is_valid()
    assert addr.family() is AddressFamily.UNKNOWN


class TestCopyAndMove:
    def test_copy_is_independent(self, backend):
        original = InternetAddress("192.0.2.1", 8080, backend=backend)
        clone = original.copy()
        assert clone == original
        assert clone.backend == original.backend

        clone.set_port(9090)
        assert original.get_port() == 8080

    def test_copy_module(self, backend):
        original = InternetAddress("2001:db8::1", 8443, backend=backend)
        assert copy.copy(original) == original
        assert copy.deepcopy(original) == original
        assert copy.copy(original) is not original

    def test_assign(self, backend):
        source = InternetAddress("2001:db8::1", 8443)
        target = InternetAddress(backend=backend)
        assert target.assign(source) is target
        assert target == source
        assert target.backend == backend
        assert source.get_ip() == "2001:db8::1"

    def test_move(self, backend):
        a = InternetAddress("192.0.2.1", 8080, backend=backend)
        before = a.copy()

        b = a.move()

        assert b == before
        assert a != before
        assert a == InternetAddress()
        assert not a.is_valid()
        assert b.is_valid()

        # no aliasing after the move
        a.set_ip("10.0.0.1")
        assert b.get_ip() == "192.0.2.1"

    def test_move_keeps_backend(self, backend):
        a = InternetAddress("::1", 5000, backend=backend)
        b = a.move()
        assert b.backend == backend
        assert a.backend == backend

    def test_move_from(self, backend):
        source = InternetAddress("192.0.2.1", 8080, backend=backend)
        before = source.copy()
        target = InternetAddress(backend=backend)

        target.move_from(source)

        assert target == before
        assert source == InternetAddress()

    def test_move_from_self_is_noop(self, backend):
        addr = InternetAddress("192.0.2.1", 8080, backend=backend)
        addr.move_from(addr)
        assert addr == InternetAddress("192.0.2.1", 8080)


class TestEquality:
    def test_reflexive_and_symmetric(self, backend):
        a = InternetAddress("192.0.2.1", 8080, backend=backend)
        b = InternetAddress("192.0.2.1", 8080, backend=backend)
        assert a == a
        assert a == b and b == a

    def test_field_inequality(self, backend):
        a = InternetAddress("192.0.2.1", 8080, backend=backend)
        assert a != InternetAddress("192.0.2.1", 8081, backend=backend)
        assert a != InternetAddress("192.0.2.2", 8080, backend=backend)

    def test_construction_path_does_not_matter(self):
        direct = InternetAddress("2001:db8::1", 8080)
        copied = direct.copy()
        moved = direct.copy().move()
        rebuilt = InternetAddress(moved.get_ip(), moved.get_port())
        socket_backed = InternetAddress("2001:db8::1", 8080, backend="socket")
        for other in (copied, moved, rebuilt, socket_backed):
            assert direct == other

    def test_equality_is_textual(self):
        # Same address, different spelling: fields differ, so not equal
        assert InternetAddress("::1", 8080) != InternetAddress("0:0:0:0:0:0:0:1", 8080)

    def test_other_types(self):
        addr = InternetAddress("192.0.2.1", 8080)
        assert addr != ("192.0.2.1", 8080)
        assert addr != "192.0.2.1:8080"

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(InternetAddress())


class TestToString:
    @pytest.mark.parametrize(
        "ip, port, expected",
        [
            ("192.0.2.1", 8080, "192.0.2.1:8080"),
            ("2001:db8::1", 443, "[2001:db8::1]:443"),
            ("::", 1024, "[::]:1024"),
            ("bad", -1, "Invalid_IP(bad):Invalid_Port(-1)"),
            ("bad", 8080, "Invalid_IP(bad):8080"),
            ("", -1, "Invalid_IP():Invalid_Port(-1)"),
            ("10.0.0.1", 80, "10.0.0.1:80"),
        ],
    )
    def test_rendering(self, backend, ip, port, expected):
        addr = InternetAddress(ip, port, backend=backend)
        assert addr.to_string() == expected
        assert str(addr) == expected

    def test_cleared_renders_non_empty(self, backend):
        assert InternetAddress(backend=backend).to_string()

    def test_repr(self):
        assert repr(InternetAddress("::1", 5000)) == (
            "InternetAddress(ip='::1', port=5000, backend='text')"
        )


class TestFromString:
    @pytest.mark.parametrize(
        "text, ip, port",
        [
            ("192.0.2.1:8080", "192.0.2.1", 8080),
            ("[2001:db8::1]:443", "2001:db8::1", 443),
            ("Invalid_IP(bad):Invalid_Port(-1)", "bad", -1),
            ("Invalid_IP():Invalid_Port(-1)", "", -1),
            ("localhost:5000", "localhost", 5000),
        ],
    )
    def test_parse(self, backend, text, ip, port):
        addr = InternetAddress.from_string(text, backend=backend)
        assert addr.get_ip() == ip
        assert addr.get_port() == port
        assert addr.backend == backend

    @pytest.mark.parametrize(
        "ip, port",
        [("192.0.2.1", 8080), ("2001:db8::1", 443), ("bad", -1), ("x", 9000)],
    )
    def test_parses_own_rendering(self, ip, port):
        addr = InternetAddress(ip, port)
        assert InternetAddress.from_string(addr.to_string()) == addr

    @pytest.mark.parametrize(
        "text",
        [
            "192.0.2.1",
            "192.0.2.1:",
            "192.0.2.1:http",
            "[::1]: 80",
            "1.2.3.4:+80",
            "",
            "2001:db8::1",
            "::1:8080",
        ],
    )
    def test_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            InternetAddress.from_string(text)

    def test_unbracketed_ipv6_host(self):
        with pytest.raises(ValueError, match="Unbracketed IPv6 host"):
            InternetAddress.from_string("2001:db8::1")

    def test_marker_host_may_contain_colons(self):
        addr = InternetAddress.from_string("Invalid_IP(a:b):8080")
        assert (addr.get_ip(), addr.get_port()) == ("a:b", 8080)

    def test_rejects_non_text(self):
        with pytest.raises(ValueError):
            InternetAddress.from_string(8080)


class TestSerialization:
    def test_to_dict(self, backend):
        addr = InternetAddress("2001:db8::1", 8080, backend=backend)
        assert addr.to_dict() == {
            "ip": "2001:db8::1",
            "port": 8080,
            "family": "ipv6",
            "is_valid": True,
        }

    def test_from_dict(self, backend):
        data = InternetAddress("bad", 80).to_dict()
        addr = InternetAddress.from_dict(data, backend=backend)
        assert addr == InternetAddress("bad", 80)
        assert addr.backend == backend

    def test_from_dict_missing_key(self):
        with pytest.raises(KeyError):
            InternetAddress.from_dict({"ip": "192.0.2.1"})


class TestSocketInterop:
    def test_ipv4_sockaddr(self, backend):
        addr = InternetAddress("192.0.2.1", 8080, backend=backend)
        assert addr.to_sockaddr() == ("192.0.2.1", 8080)
        assert addr.socket_family() == socket.AF_INET

    def test_ipv6_sockaddr(self, backend):
        addr = InternetAddress("2001:db8::1", 8080, backend=backend)
        assert addr.to_sockaddr() == ("2001:db8::1", 8080, 0, 0)
        assert addr.socket_family() == socket.AF_INET6

    def test_invalid_has_no_sockaddr(self, backend):
        assert InternetAddress("192.0.2.1", 0, backend=backend).to_sockaddr() is None
        assert InternetAddress("bad", 8080, backend=backend).to_sockaddr() is None
        assert InternetAddress("bad", 8080, backend=backend).socket_family() == socket.AF_UNSPEC


def test_constants():
    assert LOCAL_IP == "127.0.0.1"
    assert INVALID_IP == "0.0.0.0"


def test_unknown_backend():
    with pytest.raises(ValueError):
        InternetAddress("192.0.2.1", 8080, backend="carrier-pigeon")
