"""
Node startup: build every network's parameters, then select the active one from the command line.

This runs before any other subsystem starts. Failures here end the process.
"""
import json
import random
from typing import Optional, Sequence

from footycash.block import HeaderHasher
from footycash.chainparams import ParamsSelector, build_selector, select_params_from_command_line
from footycash.config import parse_args
from footycash.core import GenesisMismatchError
from footycash.core.logging import PACKAGE_LOGGER, get_logger

__all__ = ["init_chain_params", "main"]

INVALID_COMBINATION = "Invalid combination of -regtest and -testnet."


def init_chain_params(argv: Optional[Sequence[str]] = None, header_hasher: Optional[HeaderHasher] = None,
                      rng: Optional[random.Random] = None) -> ParamsSelector:
    """
    Raises:
        SystemExit: on a genesis mismatch or an invalid network flag combination
    """
    options = parse_args(argv)
    get_logger(PACKAGE_LOGGER, options.log_level)
    logger = get_logger(__name__)

    try:
        selector = build_selector(header_hasher=header_hasher, rng=rng)
    except GenesisMismatchError as e:
        logger.critical(f"Refusing to start: {e}")
        raise SystemExit(1) from e

    if not select_params_from_command_line(selector, options.testnet):
        logger.error(INVALID_COMBINATION)
        raise SystemExit(INVALID_COMBINATION)

    params = selector.active
    logger.info(f"Using {params.network.name.lower()} network, genesis {params.genesis_hash[::-1].hex()}")
    return selector


def main(argv: Optional[Sequence[str]] = None) -> int:
    selector = init_chain_params(argv)
    print(json.dumps(selector.active.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
