"""
Filesystem helpers for transaction scripts.

The plain functions let ``OSError`` propagate; the ``try_`` variants return
a ``Result`` so the caller decides whether a filesystem failure is fatal.
"""
import asyncio
import inspect
import os
from typing import Any, List, TextIO
from web3 import Web3
from txkit.utils.logging import logger
from txkit.utils.result import ErrorKind, Result

PRE_SIGNED_SEPARATOR = ",\n"

_logger = logger.bind(module='FileIO')


async def sleep(ms: float) -> None:
    """Suspend the caller for ``ms`` milliseconds."""
    await asyncio.sleep(ms / 1000)


def read_file(filename: str) -> str:
    with open(filename, 'r', encoding='utf-8') as f:
        return f.read()


def write_file(filename: str, content: str) -> None:
    """Append ``content`` to ``filename``, creating it if needed."""
    with open(filename, 'a', encoding='utf-8') as f:
        f.write(content)


def try_read_file(filename: str) -> Result[str]:
    try:
        return Result.ok(read_file(filename))
    except OSError as e:
        _logger.error(f"❌ Error reading {filename}: {e}")
        return Result.err(ErrorKind.FILESYSTEM, str(e))


def try_write_file(filename: str, content: str) -> Result[None]:
    try:
        write_file(filename, content)
        return Result.ok(None)
    except OSError as e:
        _logger.error(f"❌ Error appending to {filename}: {e}")
        return Result.err(ErrorKind.FILESYSTEM, str(e))


def new_file(filename: str) -> TextIO:
    """Open an append-mode text stream. The caller must close it."""
    return open(filename, 'a', encoding='utf-8')


def append_to(stream: TextIO, content: str) -> None:
    stream.write(content)


def ensure_path(directory: str) -> None:
    """Create ``directory`` (and parents) unless it already exists."""
    if not os.path.isdir(directory):
        _logger.info(f"📁 Creating directory {directory}")
    os.makedirs(directory, exist_ok=True)


def find_all_files(directory: str) -> List[str]:
    """Names of the non-directory entries directly inside ``directory``, sorted."""
    with os.scandir(directory) as it:
        return sorted(entry.name for entry in it if not entry.is_dir())


def _raw_hex(signed: Any) -> str:
    raw = getattr(signed, 'raw_transaction', signed)
    if isinstance(raw, str):
        return raw
    return Web3.to_hex(raw)


async def write_pre_signed_tx_file(stream: TextIO, signer: Any, tx_request: dict) -> str:
    """Populate and sign ``tx_request`` and append the raw transaction as one line.

    Lines end with ``,\\n``; the file as a whole is not a JSON document.

    Returns:
        str: The raw signed transaction that was written
    """
    populated = signer.populate_transaction(tx_request)
    if inspect.isawaitable(populated):
        populated = await populated
    signed = signer.sign_transaction(populated)
    if inspect.isawaitable(signed):
        signed = await signed
    raw_tx = _raw_hex(signed)
    append_to(stream, raw_tx + PRE_SIGNED_SEPARATOR)
    return raw_tx


def read_pre_signed_tx_file(filename: str) -> List[str]:
    """Raw transactions stored in a pre-signed batch file, in file order."""
    content = read_file(filename)
    return [chunk.strip() for chunk in content.split(PRE_SIGNED_SEPARATOR) if chunk.strip()]
