"""
Transactions
"""

# tx/__init__.py
from footycash.tx.tx import *
