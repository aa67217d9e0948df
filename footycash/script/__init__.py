"""
Script construction
"""

# script/__init__.py
from footycash.script.script_builder import *
