"""
All methods for manipulating and representing data in FootyCash
"""

# data/__init__.py
from footycash.data.compact_size import *
from footycash.data.encoding import *
from footycash.data.ip_utils import *
from footycash.data.merkle_trees import *
from footycash.data.target_bits import *
