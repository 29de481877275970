"""
Exceptions raised by the transaction helpers.
"""
from typing import Any, Optional


class TxKitError(Exception):
    """Base exception for txkit errors."""
    pass


class RpcTransportError(TxKitError):
    """Raised when a JSON-RPC call fails or returns an error object."""

    def __init__(self, message: str, method: Optional[str] = None):
        self.method = method
        super().__init__(message)


class TransactionFailedError(TxKitError):
    """Raised when a mined transaction reverted.

    The (partial) receipt is attached so callers can still report on it.
    """

    def __init__(self, message: str, receipt: Any = None):
        self.receipt = receipt
        super().__init__(message)


class LogDecodeError(TxKitError):
    """Raised when a log entry cannot be decoded into an event."""
    pass
