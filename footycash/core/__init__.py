"""
Contains the core elements that are used within FootyCash

Core:
    -Provides the standard protocol for serializable FootyCash elements
    -Provides the reference formats and constants
    -Provides custom exceptions for the various FootyCash elements
    -Provides the logger factory
"""
# core/__init__.py
from footycash.core.byte_stream import *
from footycash.core.exceptions import *
from footycash.core.formats import *
from footycash.core.logging import *
from footycash.core.serializable import *
