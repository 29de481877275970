import json
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union
from hexbytes import HexBytes
from web3._utils.events import get_event_data
from eth_utils.abi import event_abi_to_log_topic
from eth_abi.codec import ABICodec
from eth_abi.registry import registry as default_abi_registry
from .base import LogDecoder
from txkit.utils.exceptions import LogDecodeError
from txkit.utils.logging import logger
from txkit.utils.models.data_models import EventRecord, ProcessedEventDetail
from txkit.utils.receipts import get_field

# Keys get_event_data copies into its result; absent ones are filled with None
_LOG_META_KEYS = ('logIndex', 'transactionIndex', 'transactionHash', 'address', 'blockHash', 'blockNumber')


def _normalize_topic(topic: Any) -> str:
    topic_hex = topic.hex() if isinstance(topic, (bytes, bytearray)) else str(topic)
    topic_hex = topic_hex.lower()
    if topic_hex.startswith('0x'):
        topic_hex = topic_hex[2:]
    return '0x' + topic_hex


class RawLogWithInterfaceDecoder(LogDecoder):
    """Decodes raw receipt logs against the events of a contract ABI."""

    def __init__(self, abi: Union[List[Dict[str, Any]], str, Path]):
        self._logger = logger.bind(module='RawLogDecoder')
        self.codec = ABICodec(default_abi_registry)
        self.events_by_topic: Dict[str, ProcessedEventDetail] = {}
        self._prepare_events(self._load_abi(abi))

    def _load_abi(self, abi: Union[List[Dict[str, Any]], str, Path]) -> List[Dict[str, Any]]:
        if not isinstance(abi, (str, Path)):
            return list(abi)
        abi_path = Path(abi)
        if not abi_path.exists():
            self._logger.error(f"❌ ABI file not found: {abi_path}")
            raise RuntimeError(f"ABI file '{abi_path}' not found.")
        try:
            with open(abi_path, 'r') as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            self._logger.error(f"❌ Error decoding ABI file '{abi_path}': {e}")
            raise RuntimeError(f"Error decoding ABI file '{abi_path}': {e}")
        self._logger.debug(f"📂 Loaded ABI from {abi_path}")
        # Hardhat/Foundry artifacts wrap the ABI
        if isinstance(loaded, dict):
            loaded = loaded.get('abi', [])
        return loaded

    def _prepare_events(self, abi: List[Dict[str, Any]]):
        """Index the ABI's events by their topic hash."""
        for event_abi_item in (item for item in abi if item.get('type') == 'event'):
            if event_abi_item.get('anonymous'):
                # Anonymous events have no signature topic to match on
                self._logger.debug(f"Skipping anonymous event {event_abi_item.get('name', '?')}")
                continue
            try:
                event_abi = dict(event_abi_item)
                event_abi.setdefault('anonymous', False)
                topic = '0x' + event_abi_to_log_topic(event_abi).hex().lower().removeprefix('0x')
                self.events_by_topic[topic] = ProcessedEventDetail(
                    name=event_abi.get('name', 'UnnamedEvent'),
                    abi=event_abi
                )
            except Exception as abi_calc_err:
                self._logger.warning(f"⚠️ Error processing ABI item: {event_abi_item.get('name', '?')} - {abi_calc_err}")
                continue
        self._logger.debug(f"🔍 Indexed {len(self.events_by_topic)} ABI events")

    def entries(self, receipt: Any) -> Sequence[Any]:
        logs = get_field(receipt, 'logs', None)
        return list(logs) if logs else []

    def decode(self, entry: Any) -> EventRecord:
        topics = get_field(entry, 'topics', None)
        if not topics:
            raise LogDecodeError("Log entry has no topics")

        topic0 = _normalize_topic(topics[0])
        event_details = self.events_by_topic.get(topic0)
        if event_details is None:
            raise LogDecodeError(f"No ABI event matches topic {topic0}")

        log_entry = {key: get_field(entry, key, None) for key in _LOG_META_KEYS}
        try:
            log_entry['topics'] = [HexBytes(t) for t in topics]
            log_entry['data'] = HexBytes(get_field(entry, 'data', None) or b'')
            decoded_event = get_event_data(self.codec, event_details.abi, log_entry)
        except Exception as decode_err:
            raise LogDecodeError(
                f"Failed to decode event '{event_details.name}' (topic: {topic0}): {decode_err}"
            ) from decode_err

        decoded_args = decoded_event['args']
        args = [decoded_args[inp['name']] for inp in event_details.abi.get('inputs', []) if inp.get('name') in decoded_args]
        return EventRecord(name=decoded_event['event'], args=args)
