"""
txkit - helpers for submitting transactions and reading their receipts.
"""
from .utils.decoders import LogDecoder, PreDecodedEventList, RawLogWithInterfaceDecoder, DecoderManager
from .utils.exceptions import TxKitError, RpcTransportError, TransactionFailedError, LogDecodeError
from .utils.file_io import (
    sleep,
    read_file,
    write_file,
    try_read_file,
    try_write_file,
    new_file,
    append_to,
    ensure_path,
    find_all_files,
    write_pre_signed_tx_file,
    read_pre_signed_tx_file,
)
from .utils.lifecycle import (
    submit_and_await,
    try_submit_and_await,
    await_all,
    extract_status,
    extract_event,
    try_extract_event,
    show_result,
)
from .utils.models.data_models import EventRecord, StatusSummary
from .utils.result import ErrorKind, Result
from .utils.rpc import RpcHelper, RpcTransactionHandle, start_rpc, rpc_request, send_raw_transaction
from .utils.signer import Web3Signer
from .version import __version__

__all__ = [
    "LogDecoder", "PreDecodedEventList", "RawLogWithInterfaceDecoder", "DecoderManager",
    "TxKitError", "RpcTransportError", "TransactionFailedError", "LogDecodeError",
    "sleep", "read_file", "write_file", "try_read_file", "try_write_file",
    "new_file", "append_to", "ensure_path", "find_all_files",
    "write_pre_signed_tx_file", "read_pre_signed_tx_file",
    "submit_and_await", "try_submit_and_await", "await_all",
    "extract_status", "extract_event", "try_extract_event", "show_result",
    "EventRecord", "StatusSummary", "ErrorKind", "Result",
    "RpcHelper", "RpcTransactionHandle", "start_rpc", "rpc_request", "send_raw_transaction",
    "Web3Signer",
    "__version__",
]
