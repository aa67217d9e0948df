"""
Peer addresses and bootstrap seeds
"""

# network/__init__.py
from footycash.network.network_address import *
from footycash.network.seeds import *
