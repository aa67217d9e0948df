"""
FootyCash network parameters and genesis blocks
"""
__version__ = "0.1.0"
