"""
Pytest fixtures for the txkit tests.
"""
import json
import pytest
import httpx
from eth_abi import encode
from eth_utils import keccak, to_checksum_address

from txkit.utils.logging import logger
from txkit.utils.models.settings_model import RPCConfig
from txkit.utils.rpc import RpcHelper

TEST_RPC_URL = "http://rpc.test"
TEST_PRIV_KEY = "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"
TOKEN = to_checksum_address("0x1234567890123456789012345678901234567890")
ALICE = to_checksum_address("0x00000000000000000000000000000000000a11ce")
BOB = to_checksum_address("0x0000000000000000000000000000000000000b0b")

TRANSFER_TOPIC = "0x" + keccak(text="Transfer(address,address,uint256)").hex()
APPROVAL_TOPIC = "0x" + keccak(text="Approval(address,address,uint256)").hex()

ERC20_EVENTS_ABI = [
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "from", "type": "address"},
            {"indexed": True, "internalType": "address", "name": "to", "type": "address"},
            {"indexed": False, "internalType": "uint256", "name": "value", "type": "uint256"}
        ],
        "name": "Transfer",
        "type": "event"
    },
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "address", "name": "owner", "type": "address"},
            {"indexed": True, "internalType": "address", "name": "spender", "type": "address"},
            {"indexed": False, "internalType": "uint256", "name": "value", "type": "uint256"}
        ],
        "name": "Approval",
        "type": "event"
    },
    {
        "inputs": [],
        "name": "totalSupply",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    }
]


def _topic_for(address):
    return "0x" + encode(["address"], [address]).hex()


def make_event_log(topic, first, second, value, log_index=0):
    """Raw JSON-RPC log for an ERC20-style (address, address, uint256) event."""
    return {
        "address": TOKEN,
        "topics": [topic, _topic_for(first), _topic_for(second)],
        "data": "0x" + encode(["uint256"], [value]).hex(),
        "logIndex": hex(log_index),
        "transactionIndex": "0x0",
        "transactionHash": "0x" + "ab" * 32,
        "blockHash": "0x" + "cd" * 32,
        "blockNumber": "0x64",
    }


class FakeHandle:
    """Transaction handle resolving (or failing) without a node."""

    def __init__(self, receipt=None, error=None):
        self.receipt = receipt
        self.error = error
        self.wait_calls = 0

    async def wait(self):
        self.wait_calls += 1
        if self.error is not None:
            raise self.error
        return self.receipt


class ReceiptError(Exception):
    def __init__(self, message, receipt=None):
        super().__init__(message)
        self.receipt = receipt


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    sink_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)


@pytest.fixture
def erc20_abi_file(tmp_path):
    path = tmp_path / "ERC20.json"
    path.write_text(json.dumps(ERC20_EVENTS_ABI))
    return path


@pytest.fixture
def make_rpc():
    """Build an RpcHelper whose HTTP traffic goes to a handler function."""
    def _make(handler, retry=0):
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return RpcHelper(RPCConfig(url=TEST_RPC_URL, retry=retry), client=client)
    return _make
