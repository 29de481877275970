"""
Field access for receipts in their different shapes.

Receipts arrive as plain dicts from raw JSON-RPC calls (quantities are hex
strings), as web3 ``AttributeDict`` mappings, or as arbitrary objects with
attributes (test doubles, other clients).
"""
import numbers
from collections.abc import Mapping
from typing import Any, Optional

MISSING = object()


def get_field(receipt: Any, name: str, default: Any = MISSING) -> Any:
    """Read ``name`` from a mapping or an attribute, ``default`` if absent."""
    if receipt is None:
        return default
    if isinstance(receipt, Mapping):
        return receipt[name] if name in receipt else default
    return getattr(receipt, name, default)


def to_int(value: Any) -> Optional[int]:
    """Best-effort integer value of a quantity (number or ``0x`` hex string)."""
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        return int(value) if float(value).is_integer() else None
    if isinstance(value, str):
        try:
            return int(value, 16) if value.lower().startswith('0x') else int(value)
        except ValueError:
            return None
    return None
