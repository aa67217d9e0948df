"""
Selection of the active network.

The node builds one ParamsSelector at startup and passes it (or the ChainParams it returns) to every subsystem.
There is no module-level "current params".
"""
import random
import threading
from typing import Mapping, Optional

from footycash.block import HeaderHasher
from footycash.chainparams.networks import build_main_params, build_testnet_params
from footycash.chainparams.params import ChainParams, Network
from footycash.core import NetworkSelectionError
from footycash.core.logging import get_logger

logger = get_logger(__name__)

__all__ = ["ParamsSelector", "build_selector", "select_params_from_command_line"]


class ParamsSelector:
    """
    Holds the pre-built parameters of every implemented network and a reference to the active one.

    select() is meant to run once, before networking or worker threads start. Rebinding is serialized by a lock,
    but a reader that fetched `active` before a later select() keeps the old instance.
    """

    def __init__(self, params_by_network: Mapping[Network, ChainParams], default: Network = Network.MAIN):
        self._params = dict(params_by_network)
        self._lock = threading.Lock()
        if default not in self._params:
            raise NetworkSelectionError(f"Default network {default.name} has no constructed parameters")
        self._active = self._params[default]

    @property
    def active(self) -> ChainParams:
        return self._active

    def params(self) -> ChainParams:
        return self._active

    @property
    def networks(self) -> tuple[Network, ...]:
        return tuple(self._params)

    def select(self, network: Network) -> ChainParams:
        """
        Rebind the active parameters to the instance built for `network`.

        Raises:
            NetworkSelectionError: the network has no constructed instance (e.g. REGTEST)
        """
        params = self._params.get(network)
        if params is None:
            raise NetworkSelectionError(f"Unimplemented network: {getattr(network, 'name', network)}")

        with self._lock:
            self._active = params
        logger.info(f"Selected {network.name.lower()} network parameters")
        return params


def build_selector(header_hasher: Optional[HeaderHasher] = None, rng: Optional[random.Random] = None,
                   now: Optional[int] = None) -> ParamsSelector:
    """
    Eagerly build every implemented network, verifying each genesis block. Main is active.

    Raises:
        GenesisMismatchError: a genesis block does not match its literals
    """
    main = build_main_params(header_hasher, rng, now)
    testnet = build_testnet_params(main, header_hasher, rng, now)
    return ParamsSelector({Network.MAIN: main, Network.TESTNET: testnet})


def select_params_from_command_line(selector: ParamsSelector, testnet: bool) -> bool:
    """
    Apply the -testnet flag. Returns False for an invalid flag combination.

    A requested testnet is currently treated as invalid: False is returned before selecting anything, so main
    stays active.
    """
    if testnet:
        return False

    selector.select(Network.MAIN)
    return True
