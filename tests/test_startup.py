"""
Tests for node startup and command line options
"""
import logging

import pytest

from footycash.chainparams import Network
from footycash.config import parse_args, StartupOptions
from footycash.startup import init_chain_params, main, INVALID_COMBINATION
from tests.utility import pinned_hasher


def test_parse_args_defaults():
    assert parse_args([]) == StartupOptions(testnet=False, log_level="INFO")


@pytest.mark.parametrize("argv", [["-testnet"], ["--testnet"], ["--testnet", "--rpcport", "1"]])
def test_parse_args_testnet(argv):
    assert parse_args(argv).testnet


def test_parse_args_log_level():
    assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"


def test_init_chain_params_selects_main(rng):
    selector = init_chain_params([], rng=rng)
    assert selector.active.network == Network.MAIN


def test_init_chain_params_rejects_testnet_flag(rng):
    with pytest.raises(SystemExit) as exc_info:
        init_chain_params(["-testnet"], rng=rng)
    assert exc_info.value.code == INVALID_COMBINATION


def test_init_chain_params_exits_on_genesis_mismatch(rng):
    with pytest.raises(SystemExit) as exc_info:
        init_chain_params([], header_hasher=pinned_hasher({}), rng=rng)
    assert exc_info.value.code == 1


def test_main_prints_active_params(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert '"network": "main"' in out
    assert "0000005ec05d79bef930111ff31cc66e8127752a084936e0ff938fea15993241" in out


def test_log_level_reaches_module_loggers(rng, caplog):
    init_chain_params(["--log-level", "DEBUG"], rng=rng)

    assert logging.getLogger("footycash.chainparams.networks").getEffectiveLevel() == logging.DEBUG
    assert logging.getLogger("footycash.chainparams.genesis").getEffectiveLevel() == logging.DEBUG
    assert "Built main params" in caplog.text
    assert "genesis hash pinned" in caplog.text


def test_default_log_level_hides_debug(rng, caplog):
    init_chain_params([], rng=rng)

    assert logging.getLogger("footycash.chainparams.networks").getEffectiveLevel() == logging.INFO
    assert "Built main params" not in caplog.text
    assert "Selected main network parameters" in caplog.text
