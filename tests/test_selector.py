"""
Tests for selecting the active network
"""
import pytest

from footycash.chainparams import Network, ParamsSelector, build_main_params, select_params_from_command_line
from footycash.core import NetworkSelectionError


def test_main_is_default(selector):
    assert selector.active.network == Network.MAIN
    assert selector.params() is selector.active
    assert set(selector.networks) == {Network.MAIN, Network.TESTNET}


def test_select_main_and_testnet(selector):
    testnet = selector.select(Network.TESTNET)
    assert selector.active is testnet
    assert selector.active.network == Network.TESTNET

    main = selector.select(Network.MAIN)
    assert selector.active is main
    assert selector.active.network == Network.MAIN


def test_select_returns_prebuilt_instances(selector):
    first = selector.select(Network.TESTNET)
    selector.select(Network.MAIN)
    assert selector.select(Network.TESTNET) is first


def test_select_regtest_fails(selector):
    with pytest.raises(NetworkSelectionError, match="REGTEST"):
        selector.select(Network.REGTEST)
    # Failed selection leaves the active network untouched
    assert selector.active.network == Network.MAIN


def test_default_must_be_constructed(rng, now):
    main = build_main_params(rng=rng, now=now)
    with pytest.raises(NetworkSelectionError):
        ParamsSelector({Network.MAIN: main}, default=Network.TESTNET)


def test_command_line_without_testnet_selects_main(selector):
    selector.select(Network.TESTNET)
    assert select_params_from_command_line(selector, testnet=False) is True
    assert selector.active.network == Network.MAIN


def test_command_line_testnet_flag_is_rejected(selector):
    assert select_params_from_command_line(selector, testnet=True) is False
    assert selector.active.network == Network.MAIN
