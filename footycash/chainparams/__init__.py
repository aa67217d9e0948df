"""
Network parameters, genesis blocks and the active network selector
"""

# chainparams/__init__.py
from footycash.chainparams.addresses import *
from footycash.chainparams.genesis import *
from footycash.chainparams.networks import *
from footycash.chainparams.params import *
from footycash.chainparams.seed_tables import *
from footycash.chainparams.selector import *
