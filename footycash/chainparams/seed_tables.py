"""
Compiled-in fixed seed tables.

Regenerate from a nodes_main.txt / nodes_test.txt list with footycash.network.load_seed_specs. Both networks
currently ship without fixed seeds and bootstrap from DNS only.
"""
from footycash.network import SeedSpec6

__all__ = ["MAIN_SEEDS", "TEST_SEEDS"]

MAIN_SEEDS: tuple[SeedSpec6, ...] = ()

TEST_SEEDS: tuple[SeedSpec6, ...] = ()
