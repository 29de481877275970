from typing import Any, Dict, Optional
from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3, Web3, AsyncHTTPProvider
from txkit.utils.logging import logger


class Web3Signer:
    """Populates and signs transactions with a local key.

    Nonces are tracked locally after the first lookup so a batch of
    transactions signed ahead of broadcast gets consecutive nonces.
    """

    def __init__(self, w3: AsyncWeb3, account: LocalAccount):
        self.w3 = w3
        self.account = account
        self._next_nonce: Optional[int] = None
        self._logger = logger.bind(module='Web3Signer')

    @classmethod
    def from_key(cls, rpc_url: str, private_key: str) -> "Web3Signer":
        return cls(AsyncWeb3(AsyncHTTPProvider(rpc_url)), Account.from_key(private_key))

    @property
    def address(self) -> str:
        return self.account.address

    async def populate_transaction(self, tx_request: Dict[str, Any]) -> Dict[str, Any]:
        """Fill ``from``, ``nonce``, ``chainId``, ``gas`` and fee fields left unset."""
        tx = dict(tx_request)
        tx.setdefault('from', self.address)
        if 'to' in tx and tx['to']:
            tx['to'] = Web3.to_checksum_address(tx['to'])

        if 'nonce' not in tx:
            if self._next_nonce is None:
                self._next_nonce = await self.w3.eth.get_transaction_count(self.address, 'pending')
            tx['nonce'] = self._next_nonce
        self._next_nonce = tx['nonce'] + 1

        if 'chainId' not in tx:
            tx['chainId'] = await self.w3.eth.chain_id
        if 'gasPrice' not in tx and 'maxFeePerGas' not in tx:
            tx['gasPrice'] = await self.w3.eth.gas_price
        if 'gas' not in tx:
            tx['gas'] = await self.w3.eth.estimate_gas(tx)

        self._logger.debug(f"Populated tx nonce={tx['nonce']} chainId={tx['chainId']} gas={tx['gas']}")
        return tx

    def sign_transaction(self, tx: Dict[str, Any]) -> str:
        unsigned = {key: value for key, value in tx.items() if key != 'from'}
        signed = self.account.sign_transaction(unsigned)
        return Web3.to_hex(signed.raw_transaction)
