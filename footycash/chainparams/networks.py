"""
The network definitions.

Main declares the full parameter set. Testnet is Main with the explicit overrides in build_testnet_params: it keeps
Main's coinbase transaction and timestamp text and only changes the block-level bits, nonce and hash of the genesis
block.
"""
import random
from dataclasses import replace
from typing import Iterable, Optional

from footycash.block import HeaderHasher
from footycash.chainparams.genesis import GenesisSpec, build_genesis_block, check_genesis
from footycash.chainparams.params import ChainParams, Network, Base58Type, DNSSeedData
from footycash.chainparams.seed_tables import MAIN_SEEDS, TEST_SEEDS
from footycash.core import COIN, CENT
from footycash.core.logging import get_logger
from footycash.data import max_target_shifted, target_to_bits
from footycash.network import SeedSpec6, convert_seed6

logger = get_logger(__name__)

__all__ = ["uint256", "MAIN_GENESIS", "MAIN_GENESIS_HASH", "MAIN_GENESIS_MERKLE_ROOT", "TEST_GENESIS",
           "TEST_GENESIS_HASH", "build_main_params", "build_testnet_params"]


def uint256(display_hex: str) -> bytes:
    """
    Literal 256-bit hash in display (RPC) order -> natural byte order
    """
    value = bytes.fromhex(display_hex.removeprefix("0x"))
    if len(value) != 32:
        raise ValueError(f"uint256 literal must be 32 bytes: {display_hex}")
    return value[::-1]


ALERT_PUBKEY = bytes.fromhex(
    "04acdb4977a559440c1fa273cc79ef738ece2bfdc984ebcbd1defad4656b30d13d97a5f64448eb5ff4fd56420b340bf5d63ae57e929b"
    "666d5717f853a629103f61")
CHECKPOINT_PUBKEY = bytes.fromhex(
    "0448addbefe39432f89547603c7016cac247ad9fdffa34459d5534cf0d64f3afec95a4f20c3d80941cdc771fa2ec4a652488dcfe8cc6"
    "abf5f3f2ab05a79f8bba6e")

# --- MAIN --- #
MAIN_POW_LIMIT = max_target_shifted(18)
MAIN_POS_LIMIT = max_target_shifted(5)

MAIN_GENESIS = GenesisSpec(
    timestamp_text="2016 FootyCash launches and is a huge success",
    tx_time=1456082001,
    time=1456082001,
    bits=target_to_bits(MAIN_POW_LIMIT),
    nonce=449,
)
MAIN_GENESIS_HASH = uint256("0000005ec05d79bef930111ff31cc66e8127752a084936e0ff938fea15993241")
MAIN_GENESIS_MERKLE_ROOT = uint256("4e448dece2984c7c9312b4d878e8493664375d4b8b9fbdf232094aae71328406")

# --- TESTNET --- #
TEST_POW_LIMIT = max_target_shifted(16)
TEST_POS_LIMIT = max_target_shifted(20)

TEST_GENESIS = replace(MAIN_GENESIS, bits=target_to_bits(TEST_POW_LIMIT), nonce=0)
TEST_GENESIS_HASH = uint256("0000d864d0d5e1e6c08d8a9b6cdf66a62bc1c9a68d5c82e6088f368eaf770905")


def _fixed_seeds(specs: Iterable[SeedSpec6], rng: Optional[random.Random], now: Optional[int]):
    return tuple(convert_seed6(specs, rng=rng, now=now))


def build_main_params(header_hasher: Optional[HeaderHasher] = None, rng: Optional[random.Random] = None,
                      now: Optional[int] = None) -> ChainParams:
    """
    Build and verify the main network parameters.

    Raises:
        GenesisMismatchError: if the genesis block does not reproduce the hardcoded literals
    """
    genesis = build_genesis_block(MAIN_GENESIS)
    genesis_hash = check_genesis("main", genesis, MAIN_GENESIS_HASH, MAIN_GENESIS_MERKLE_ROOT, header_hasher)

    basic_pow_reward = 1000 * COIN
    last_pow_block = 20160
    pos_granularity = 15

    params = ChainParams(
        network=Network.MAIN,
        genesis_block=genesis,
        genesis_hash=genesis_hash,
        message_start=bytes([0x44, 0x45, 0x53, 0x54]),
        alert_pubkey=ALERT_PUBKEY,
        checkpoint_pubkey=CHECKPOINT_PUBKEY,
        default_port=19199,
        rpc_port=19200,
        pow_limit=MAIN_POW_LIMIT,
        pos_limit=MAIN_POS_LIMIT,
        subsidy_halving_interval=2000,
        data_dir="",
        dns_seeds=(DNSSeedData("seed.footycash.com", "seed.footycash.com"),),
        base58_prefixes={
            Base58Type.PUBKEY_ADDRESS: bytes([30, 101, 250]),
            Base58Type.SCRIPT_ADDRESS: bytes([85, 85, 85]),
            Base58Type.SECRET_KEY: bytes([153, 153, 153]),
            Base58Type.EXT_PUBLIC_KEY: bytes.fromhex("0488b21e"),
            Base58Type.EXT_SECRET_KEY: bytes.fromhex("0488ade4"),
        },
        fixed_seeds=_fixed_seeds(MAIN_SEEDS, rng, now),
        target_spacing=(pos_granularity + 1) * 4,
        basic_pow_reward=basic_pow_reward,
        coinbase_maturity=20,
        launch_time=genesis.timestamp,
        max_money=last_pow_block * basic_pow_reward,
        last_pow_block=last_pow_block,
        pow_halving=2000,
        pos_granularity=pos_granularity,
        pos_halving=1350 * 365,
        min_delay=2,
        first_pos_block=10000,
        stake_coin_year_reward=3 * CENT,
        stake_min_age=8 * 60 * 60,
        modifier_interval=10 * 60,
        stake_min_confirmations=20,
    )
    logger.debug(f"Built main params: genesis {genesis_hash[::-1].hex()}")
    return params


def build_testnet_params(main: ChainParams, header_hasher: Optional[HeaderHasher] = None,
                         rng: Optional[random.Random] = None, now: Optional[int] = None) -> ChainParams:
    """
    Build and verify the test network parameters from the main ones. Everything not overridden here is Main's.

    Raises:
        GenesisMismatchError: if the genesis block does not reproduce the hardcoded literals
    """
    genesis = build_genesis_block(TEST_GENESIS)
    # Same coinbase as main, so same merkle root
    genesis_hash = check_genesis("testnet", genesis, TEST_GENESIS_HASH, MAIN_GENESIS_MERKLE_ROOT, header_hasher)

    params = replace(
        main,
        network=Network.TESTNET,
        genesis_block=genesis,
        genesis_hash=genesis_hash,
        message_start=bytes([0x64, 0x65, 0x73, 0x74]),
        pow_limit=TEST_POW_LIMIT,
        default_port=20199,
        rpc_port=20200,
        data_dir="testnet",
        dns_seeds=(),
        fixed_seeds=_fixed_seeds(TEST_SEEDS, rng, now),
        base58_prefixes={
            Base58Type.PUBKEY_ADDRESS: bytes([111]),
            Base58Type.SCRIPT_ADDRESS: bytes([196]),
            Base58Type.SECRET_KEY: bytes([239]),
            Base58Type.EXT_PUBLIC_KEY: bytes.fromhex("043587cf"),
            Base58Type.EXT_SECRET_KEY: bytes.fromhex("04358394"),
        },
        pos_limit=TEST_POS_LIMIT,
        coinbase_maturity=10,
        stake_min_confirmations=10,
        stake_min_age=8 * 60,
        stake_coin_year_reward=5 * CENT,  # 5% per year
        last_pow_block=1350 * 5 * 6,
        max_money=3141592654 * COIN,
    )
    logger.debug(f"Built testnet params: genesis {genesis_hash[::-1].hex()}")
    return params
