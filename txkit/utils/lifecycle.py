"""
Transaction lifecycle helpers: submit, wait, summarize, and read events.

Waits are terminal. A failed transaction is reported through the partial
receipt its error carries; nothing here retries or times out.
"""
import asyncio
import inspect
from typing import Any, Awaitable, Callable, Iterable, List, Optional, TextIO
from txkit.utils.decoders.base import LogDecoder
from txkit.utils.logging import logger
from txkit.utils.models.data_models import StatusSummary
from txkit.utils.receipts import MISSING, get_field, to_int
from txkit.utils.result import ErrorKind, Result

_logger = logger.bind(module='TxLifecycle')


async def _resolve(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


async def try_submit_and_await(submit: Callable[..., Any], *args: Any) -> Result[Any]:
    """Submit a transaction and wait for its receipt exactly once.

    Args:
        submit: Callable (sync or async) returning a handle with a ``wait()`` method
        *args: Arguments passed to ``submit``

    Returns:
        Result: ``ok(receipt)``; ``TRANSACTION_FAILED`` with the partial receipt
        as value when the error carried one; ``TRANSPORT_FAILURE`` otherwise.
    """
    try:
        handle = await _resolve(submit(*args))
        receipt = await _resolve(handle.wait())
        return Result.ok(receipt)
    except Exception as e:
        receipt = getattr(e, 'receipt', None)
        if receipt is not None:
            _logger.debug(f"Transaction failed with receipt attached: {e}")
            return Result.err(ErrorKind.TRANSACTION_FAILED, str(e), value=receipt)
        _logger.debug(f"Transaction wait failed without a receipt: {type(e).__name__} - {e}")
        return Result.err(ErrorKind.TRANSPORT_FAILURE, str(e))


async def submit_and_await(submit: Callable[..., Any], *args: Any) -> Any:
    """Submit a transaction and return its receipt.

    Never raises for submission or wait errors: a failed transaction yields
    the partial receipt attached to the error, or ``None`` if there is none.
    """
    result = await try_submit_and_await(submit, *args)
    return result.value


def extract_status(receipt: Any) -> StatusSummary:
    """Summarize a receipt as status and block height.

    Receipts without a ``status`` field (or no receipt at all) map to the
    ``""``/``""`` unknown sentinel. A status of ``0`` is reported as is.
    """
    status = get_field(receipt, 'status')
    if status is MISSING:
        return StatusSummary(status="", height="")
    height = get_field(receipt, 'blockNumber', "")
    return StatusSummary(status=status, height="" if height is None else height)


def show_result(result: StatusSummary, out: Optional[TextIO] = None):
    print(f"Tx Status:{result.status} Height:{result.height}", file=out)


async def await_all(handles: Iterable[Awaitable[Any]], out: Optional[TextIO] = None) -> Optional[List[StatusSummary]]:
    """Wait for a batch of pending transactions and print one status line each.

    Lines follow input order. If any awaitable raises, the error is logged,
    nothing is printed for the batch, and ``None`` is returned.
    """
    try:
        receipts = await asyncio.gather(*handles)
    except Exception as e:
        _logger.error(f"💥 Failed waiting for transaction batch: {type(e).__name__} - {e}")
        return None

    summaries = [extract_status(receipt) for receipt in receipts]
    for summary in summaries:
        show_result(summary, out=out)
    return summaries


def _is_successful(receipt: Any) -> bool:
    return to_int(get_field(receipt, 'status', None)) == 1


def try_extract_event(receipt: Any, decoder: LogDecoder, event_name: str) -> Result[Any]:
    """Find the first entry decoding to ``event_name`` and return its first argument.

    Entries that fail to decode are logged and skipped. Scanning stops at the
    first match.
    """
    if not _is_successful(receipt):
        return Result.err(ErrorKind.NOT_SUCCESSFUL, "receipt status is not 1")

    decode_failures = 0
    for index, entry in enumerate(decoder.entries(receipt)):
        try:
            record = decoder.decode(entry)
        except Exception as decode_err:
            decode_failures += 1
            _logger.error(f"💥 Error decoding log {index}: {decode_err}")
            continue
        if record.name == event_name:
            return Result.ok(record.args[0] if record.args else None)

    if decode_failures:
        return Result.err(
            ErrorKind.DECODE_FAILURE,
            f"event '{event_name}' not found; {decode_failures} log(s) failed to decode"
        )
    return Result.err(ErrorKind.NO_SUCH_EVENT, f"event '{event_name}' not found")


def extract_event(receipt: Any, decoder: LogDecoder, event_name: str) -> Any:
    """Return the first argument of the named event, or ``""`` if there is none."""
    return try_extract_event(receipt, decoder, event_name).unwrap_or("")
