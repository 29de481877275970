from typing import Any, Sequence
from .base import LogDecoder
from txkit.utils.exceptions import LogDecodeError
from txkit.utils.models.data_models import EventRecord
from txkit.utils.receipts import get_field


class PreDecodedEventList(LogDecoder):
    """Reads events a client library already classified onto the receipt.

    Each entry of ``receipt.events`` is an ``{event, data}`` pair. The whole
    ``data`` field becomes the single argument of the record.
    """

    def entries(self, receipt: Any) -> Sequence[Any]:
        events = get_field(receipt, 'events', None)
        return list(events) if events else []

    def decode(self, entry: Any) -> EventRecord:
        if entry is None:
            raise LogDecodeError("Empty event entry")
        # Logs the client could not classify carry no event name; they never match
        name = get_field(entry, 'event', None) or ''
        return EventRecord(name=str(name), args=[get_field(entry, 'data', None)])
