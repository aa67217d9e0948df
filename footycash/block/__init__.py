"""
Blocks and block headers
"""

# block/__init__.py
from footycash.block.block import *
