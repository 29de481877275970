import httpx
import asyncio
from typing import Optional, Any
from txkit.utils.exceptions import RpcTransportError, TransactionFailedError
from txkit.utils.models.settings_model import RPCConfig
from txkit.utils.logging import logger
from txkit.utils.receipts import get_field, to_int
from txkit.utils.result import ErrorKind, Result


class RpcHelper:
    def __init__(self, config: RPCConfig, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self.client = client or httpx.AsyncClient(timeout=config.request_time_out)
        self._logger = logger.bind(module='RpcHelper')

    async def try_request(self, method: str, params: Optional[list] = None) -> Result[Any]:
        """Makes a JSON-RPC request, retrying transport failures ``config.retry`` times."""
        payload = {
            "id": 1,
            "jsonrpc": "2.0",
            "method": method,
            "params": params if params is not None else [],
        }
        for attempt in range(self.config.retry + 1):
            try:
                response = await self.client.post(self.config.url, json=payload)
                response.raise_for_status()
                data = response.json()
                if "error" in data:
                    self._logger.error(f"RPC Error ({method}): {data['error']}")
                    return Result.err(ErrorKind.TRANSPORT_FAILURE, f"RPC error: {data['error']}")
                return Result.ok(data.get("result"))
            except httpx.RequestError as e:
                self._logger.warning(f"Request failed ({method}, attempt {attempt+1}/{self.config.retry+1}): {e}")
                if attempt == self.config.retry:
                    self._logger.error(f"Max retries exceeded for {method}.")
                    return Result.err(ErrorKind.TRANSPORT_FAILURE, str(e))
                await asyncio.sleep(1) # Simple backoff
            except Exception as e:
                self._logger.error(f"Unexpected error during RPC call ({method}): {e}")
                return Result.err(ErrorKind.TRANSPORT_FAILURE, str(e))
        return Result.err(ErrorKind.TRANSPORT_FAILURE, "no attempt made")

    async def request(self, method: str, params: Optional[list] = None) -> Any:
        """Makes a JSON-RPC request; returns ``""`` on any failure."""
        result = await self.try_request(method, params)
        return result.unwrap_or("")

    async def get_transaction_receipt(self, tx_hash: str) -> Result[Any]:
        """Fetches the transaction receipt for a given hash (``None`` while pending)."""
        self._logger.trace(f"Fetching receipt for tx: {tx_hash}")
        return await self.try_request("eth_getTransactionReceipt", [tx_hash])

    async def close(self):
        await self.client.aclose()


class RpcTransactionHandle:
    """A broadcast transaction whose receipt is fetched over JSON-RPC."""

    def __init__(self, rpc: RpcHelper, tx_hash: str, poll_interval: float = 1.0):
        self.rpc = rpc
        self.tx_hash = tx_hash
        self.poll_interval = poll_interval

    async def wait(self) -> Any:
        """Poll until the receipt exists.

        Raises:
            RpcTransportError: If the receipt query fails
            TransactionFailedError: If the transaction reverted (receipt attached)
        """
        while True:
            result = await self.rpc.get_transaction_receipt(self.tx_hash)
            if not result.is_ok:
                raise RpcTransportError(result.message, method="eth_getTransactionReceipt")
            receipt = result.value
            if receipt is not None:
                break
            await asyncio.sleep(self.poll_interval)

        if to_int(get_field(receipt, 'status', None)) == 0:
            raise TransactionFailedError(f"Transaction {self.tx_hash} reverted", receipt=receipt)
        return receipt

    def __repr__(self):
        return f"RpcTransactionHandle({self.tx_hash})"


def start_rpc(url: str, retry: int = 0, request_time_out: int = 30) -> RpcHelper:
    """Open a JSON-RPC session against ``url``."""
    return RpcHelper(RPCConfig(url=url, retry=retry, request_time_out=request_time_out))


async def rpc_request(client: RpcHelper, method: str, params: Optional[list] = None) -> Any:
    return await client.request(method, params)


async def send_raw_transaction(rpc: RpcHelper, raw_tx: str, poll_interval: float = 1.0) -> RpcTransactionHandle:
    """Broadcast a signed transaction and return a handle on it."""
    result = await rpc.try_request("eth_sendRawTransaction", [raw_tx])
    if not result.is_ok or not result.value:
        raise RpcTransportError(result.message or "no transaction hash returned", method="eth_sendRawTransaction")
    return RpcTransactionHandle(rpc, result.value, poll_interval=poll_interval)
