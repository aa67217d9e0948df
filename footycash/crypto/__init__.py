"""
crypto folder used to house the hash functions
"""

# crypto/__init__.py
from footycash.crypto.hash_functions import *
