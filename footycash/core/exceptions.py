"""
The custom exceptions used throughout FootyCash
"""
__all__ = ["StreamError", "ReadError", "WriteError", "DataEncodingError", "TargetBitsError", "MerkleError",
           "ScriptError", "ChainParamsError", "GenesisMismatchError", "NetworkSelectionError"]


class StreamError(Exception):
    """
    Catchall for stream errors
    """
    pass


class ReadError(StreamError):
    """
    For when trying to read data of length n from the stream and receiving data of length < n
    """
    pass


class WriteError(StreamError):
    """
    For when writing data that would be otherwise out of bounds
    """
    pass


class DataEncodingError(Exception):
    """
    For use in base58 encoding and decoding
    """
    pass


class TargetBitsError(Exception):
    """
    For use in target bit encoding and decoding
    """
    pass


class MerkleError(Exception):
    """
    For use in the MerkleTree class
    """
    pass


class ScriptError(Exception):
    """
    For use in the ScriptBuilder
    """
    pass


class ChainParamsError(Exception):
    """
    Parent class for chain parameter errors. These are never recoverable: the node must not start.
    """
    pass


class GenesisMismatchError(ChainParamsError):
    """
    Raised when a computed genesis value differs from the literal hardcoded for the network
    """

    def __init__(self, network: str, field: str, expected: bytes, actual: bytes):
        self.network = network
        self.field = field
        self.expected = expected
        self.actual = actual
        # Display in RPC byte order
        super().__init__(
            f"{network} genesis {field} mismatch: expected {expected[::-1].hex()}, computed {actual[::-1].hex()}"
        )


class NetworkSelectionError(ChainParamsError):
    """
    Raised when selecting a network that has no constructed parameters
    """
    pass
