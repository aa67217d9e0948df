"""
Compiled-in bootstrap seeds.

A SeedSpec6 is a raw 16-byte address plus port. convert_seed6 turns them into NetAddr objects whose last-seen time is
one to two weeks in the past, so that fresher addresses learned from the first peers replace them.
"""
import random
import time
from dataclasses import dataclass
from typing import Iterable, Optional

from footycash.core import NETWORK
from footycash.core.logging import get_logger
from footycash.data import normalize, pack16, split_host_port
from footycash.network.network_address import NetAddr

logger = get_logger(__name__)

__all__ = ["SeedSpec6", "convert_seed6", "parse_seed_spec", "load_seed_specs"]


@dataclass(frozen=True, slots=True)
class SeedSpec6:
    addr: bytes
    port: int

    def __post_init__(self):
        if len(self.addr) != NETWORK.IP_BYTES:
            raise ValueError(f"Seed address must be {NETWORK.IP_BYTES} bytes, got {len(self.addr)}")
        if not 0 <= self.port <= 0xffff:
            raise ValueError(f"Seed port out of range: {self.port}")


def convert_seed6(specs: Iterable[SeedSpec6], rng: Optional[random.Random] = None,
                  now: Optional[int] = None) -> list[NetAddr]:
    """
    Convert seed specs into addresses, in order. Each gets a last-seen time of now minus a uniformly random
    duration in [1 week, 2 weeks).

    Args:
        specs: the compiled seed records
        rng: random source for the staleness offset; a fresh unseeded Random if omitted
        now: current unix time; the system clock if omitted
    """
    rng = rng or random.Random()
    now = int(time.time()) if now is None else now

    seeds = []
    for spec in specs:
        last_seen = now - rng.randrange(NETWORK.ONE_WEEK) - NETWORK.ONE_WEEK
        seeds.append(NetAddr(spec.addr, spec.port, timestamp=last_seen))
    return seeds


def parse_seed_spec(text: str, default_port: int) -> SeedSpec6:
    """
    Parse one seed entry. Accepted forms:
        1.2.3.4         1.2.3.4:port
        ::1             [::1]:port
        0x0100007f      (legacy little-endian IPv4)
    """
    host, port = split_host_port(text, default_port)

    if host.lower().startswith("0x"):
        try:
            raw = int(host, 16).to_bytes(4, "little")
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Invalid legacy seed address: {text!r}") from e
        return SeedSpec6(normalize(raw).packed, port)

    return SeedSpec6(pack16(host), port)


def load_seed_specs(lines: Iterable[str], default_port: int) -> list[SeedSpec6]:
    """
    Parse a seed list, one entry per line. Blank lines and '#' comments are skipped.
    """
    specs = []
    for line in lines:
        entry = line.split("#", 1)[0].strip()
        if entry:
            specs.append(parse_seed_spec(entry, default_port))
    logger.debug(f"Loaded {len(specs)} seed specs")
    return specs
