"""
The ChainParams record: the consensus-critical constants of one network.

Every subsystem reads network constants through a ChainParams instance handed to it at startup. Instances are frozen
once built; see footycash.chainparams.networks for the definitions and footycash.chainparams.selector for choosing one.
"""
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, NamedTuple

from footycash.block import Block
from footycash.core import NETWORK
from footycash.data import target_to_bits
from footycash.network import NetAddr

__all__ = ["Network", "Base58Type", "DNSSeedData", "ChainParams"]


class Network(IntEnum):
    MAIN = 0
    TESTNET = 1
    REGTEST = 2


class Base58Type(IntEnum):
    PUBKEY_ADDRESS = 0
    SCRIPT_ADDRESS = 1
    SECRET_KEY = 2
    EXT_PUBLIC_KEY = 3
    EXT_SECRET_KEY = 4


class DNSSeedData(NamedTuple):
    name: str
    host: str


@dataclass(frozen=True, eq=False)
class ChainParams:
    """
    Hashes are held in natural byte order; reverse for display. Targets are plain ints, amounts are in base units.
    """
    network: Network
    genesis_block: Block
    genesis_hash: bytes
    message_start: bytes
    alert_pubkey: bytes
    checkpoint_pubkey: bytes
    default_port: int
    rpc_port: int
    pow_limit: int
    pos_limit: int
    subsidy_halving_interval: int
    data_dir: str
    dns_seeds: tuple[DNSSeedData, ...]
    base58_prefixes: Mapping[Base58Type, bytes]
    fixed_seeds: tuple[NetAddr, ...]

    # Chain
    target_spacing: int
    basic_pow_reward: int
    coinbase_maturity: int
    launch_time: int
    max_money: int

    # PoW section
    last_pow_block: int
    pow_halving: int

    # PoS section
    pos_granularity: int
    pos_halving: int
    min_delay: int
    first_pos_block: int
    stake_coin_year_reward: int
    stake_min_age: int
    modifier_interval: int  # time to elapse before a new stake modifier is computed
    stake_min_confirmations: int

    require_rpc_password: bool = field(default=True)

    def __post_init__(self):
        if len(self.message_start) != NETWORK.MESSAGE_START_SIZE:
            raise ValueError(f"Message start must be {NETWORK.MESSAGE_START_SIZE} bytes")

        missing = [kind.name for kind in Base58Type if not self.base58_prefixes.get(kind)]
        if missing:
            raise ValueError(f"{self.network.name} is missing base58 prefixes: {', '.join(missing)}")

        # Read-only view over a private copy
        object.__setattr__(self, "base58_prefixes", MappingProxyType(dict(self.base58_prefixes)))
        object.__setattr__(self, "dns_seeds", tuple(self.dns_seeds))
        object.__setattr__(self, "fixed_seeds", tuple(self.fixed_seeds))

    @property
    def is_testnet(self) -> bool:
        # False for regtest
        return self.network == Network.TESTNET

    @property
    def pow_limit_bits(self) -> bytes:
        return target_to_bits(self.pow_limit)

    def base58_prefix(self, kind: Base58Type) -> bytes:
        return self.base58_prefixes[kind]

    def future_drift(self, time: int, height: int) -> int:
        return time + NETWORK.MAX_FUTURE_DRIFT

    def get_target_spacing(self, height: int) -> int:
        return self.target_spacing

    def to_dict(self) -> dict:
        return {
            "network": self.network.name.lower(),
            "genesis_hash": self.genesis_hash[::-1].hex(),
            "merkle_root": self.genesis_block.merkle_root[::-1].hex(),
            "message_start": self.message_start.hex(),
            "default_port": self.default_port,
            "rpc_port": self.rpc_port,
            "pow_limit_bits": self.pow_limit_bits.hex(),
            "data_dir": self.data_dir,
            "dns_seeds": [seed.host for seed in self.dns_seeds],
            "fixed_seeds": len(self.fixed_seeds),
            "base58_prefixes": {kind.name: prefix.hex() for kind, prefix in self.base58_prefixes.items()},
            "max_money": self.max_money,
        }
