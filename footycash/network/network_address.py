"""
The NetAddr class for the network address data structure
"""
import ipaddress as IP
from datetime import datetime, timezone

from footycash.core import Immutable, Serializable, SERIALIZED, get_stream, read_little_int, read_stream, \
    read_big_int, NETWORK
from footycash.data import IPLike, normalize, to_display

__all__ = ["NetAddr", "NODE_NETWORK"]

NODE_NETWORK = 1


class NetAddr(Immutable, Serializable):
    """
    -----------------------------------------------------------------
    |   Name            | Data type | Formatted             | Size  |
    -----------------------------------------------------------------
    |   time            | int       | little-endian         | 4     |
    |   Services        | int       | little-endian         | 8     |
    |   ip address      | ipv6      | network byte order    | 16    |
    |   port            | int       | network byte order    | 2     |
    -----------------------------------------------------------------
    The time field is the last time the address was seen.
    """
    __slots__ = ("timestamp", "services", "ip_address", "port")

    TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(self, ip_addr: IPLike, port: int, timestamp: int = 0, services: int = NODE_NETWORK):
        self.ip_address: IP.IPv6Address = normalize(ip_addr)
        self.port = port
        self.timestamp = timestamp
        self.services = services
        self._freeze()

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        timestamp = read_little_int(stream, NETWORK.TIME_BYTES, "time")
        services = read_little_int(stream, NETWORK.SERVICES_BYTES, "services")
        ip_bytes = read_stream(stream, NETWORK.IP_BYTES, "ip")
        port = read_big_int(stream, NETWORK.PORT_BYTES, "port")

        return cls(ip_bytes, port, timestamp, services)

    @property
    def display_ip(self) -> str:
        return to_display(self.ip_address)

    @property
    def display_time(self) -> str:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc).strftime(self.TIME_FORMAT)

    @property
    def endpoint(self) -> tuple[str, int]:
        return self.display_ip, self.port

    def to_bytes(self) -> bytes:
        parts = [
            self.timestamp.to_bytes(NETWORK.TIME_BYTES, "little"),
            self.services.to_bytes(NETWORK.SERVICES_BYTES, "little"),
            self.ip_address.packed,
            self.port.to_bytes(NETWORK.PORT_BYTES, "big")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "time": self.display_time,
            "services": self.services,
            "ip_address": self.display_ip,
            "port": self.port
        }
