"""
Fixtures used in the tests
"""
import random

import pytest

from footycash.chainparams import build_selector
from tests.utility import FIXED_NOW


@pytest.fixture()
def rng():
    return random.Random(20160222)


@pytest.fixture()
def now():
    return FIXED_NOW


@pytest.fixture()
def selector(rng, now):
    return build_selector(rng=rng, now=now)
