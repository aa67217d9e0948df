"""
Canonical IP helpers for FootyCash.
One internal type (IPv6) everywhere; IPv4 is mapped to ::ffff:W.X.Y.Z at the edges.
"""

from __future__ import annotations

import ipaddress as _ip

__all__ = ["IPLike", "normalize", "to_display", "pack16", "split_host_port"]

IPLike = str | bytes | _ip.IPv4Address | _ip.IPv6Address


def normalize(ip: IPLike) -> _ip.IPv6Address:
    """
    Return an IPv6Address. IPv4 is mapped to ::ffff:W.X.Y.Z.
    Strings may be bracketed, e.g. [::1].
    """
    if isinstance(ip, _ip.IPv6Address):
        return ip
    if isinstance(ip, _ip.IPv4Address):
        return _ip.IPv6Address(b"\x00" * 10 + b"\xff\xff" + ip.packed)

    if isinstance(ip, (bytes, bytearray, memoryview)):
        b = bytes(ip)
        if len(b) == 16:
            return _ip.IPv6Address(b)
        if len(b) == 4:
            return normalize(_ip.IPv4Address(b))
        raise ValueError("IP bytes must be length 4 or 16")

    if isinstance(ip, str):
        s = ip.strip()
        if s.startswith("[") and s.endswith("]"):
            s = s[1:-1]
        return normalize(_ip.ip_address(s))

    raise TypeError(f"Unsupported IP input type: {type(ip)}")


def to_display(ip: IPLike) -> str:
    """Dotted-quad for mapped v4; compressed for native v6."""
    ip6 = normalize(ip)
    return str(ip6.ipv4_mapped) if ip6.ipv4_mapped else str(ip6)


def pack16(ip: IPLike) -> bytes:
    """16-byte network-order representation."""
    return normalize(ip).packed


def split_host_port(text: str, default_port: int) -> tuple[str, int]:
    """
    Split "host", "host:port", "[v6]" or "[v6]:port". A bare IPv6 address (more than one colon) carries no port.
    """
    s = text.strip()
    if s.startswith("["):
        host, sep, rest = s[1:].partition("]")
        if not sep:
            raise ValueError(f"Unterminated IPv6 bracket: {text!r}")
        if not rest:
            return host, default_port
        if not rest.startswith(":"):
            raise ValueError(f"Unexpected characters after IPv6 bracket: {text!r}")
        return host, _parse_port(rest[1:], text)

    if s.count(":") == 1:
        host, port = s.split(":")
        return host, _parse_port(port, text)

    return s, default_port


def _parse_port(port: str, text: str) -> int:
    if not port.isdigit() or not 0 < int(port) <= 0xffff:
        raise ValueError(f"Invalid port in {text!r}")
    return int(port)
