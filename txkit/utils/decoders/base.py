from abc import ABC, abstractmethod
from typing import Any, Sequence
from txkit.utils.models.data_models import EventRecord


class LogDecoder(ABC):
    """Base class for receipt event decoders."""

    @abstractmethod
    def entries(self, receipt: Any) -> Sequence[Any]:
        """Return the receipt entries to scan, in receipt order.

        Args:
            receipt: The transaction receipt (mapping or attribute object)
        """
        pass

    @abstractmethod
    def decode(self, entry: Any) -> EventRecord:
        """Decode one entry into an event.

        Raises:
            LogDecodeError: If the entry cannot be decoded
        """
        pass
