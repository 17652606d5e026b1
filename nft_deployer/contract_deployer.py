"""
Contract Deployer Module
Handles deploying compiled contracts through an Ethereum JSON-RPC node
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import aiohttp
from eth_account import Account
from eth_utils import to_checksum_address, to_hex
from web3 import AsyncHTTPProvider, AsyncWeb3

from nft_deployer.artifacts import Artifact, load_artifact
from nft_deployer.config import NetworkConfig
from nft_deployer.errors import DeploymentError, TransactionRevertedError

logger = logging.getLogger(__name__)


def describe_transport_error(error: aiohttp.ClientError) -> str:
    """Summarize a transport error without the request URL, which carries the API key"""
    if isinstance(error, aiohttp.ClientResponseError):
        return f"HTTP {error.status} {error.message}"
    return type(error).__name__


class ContractDeployer:
    def __init__(self, network: NetworkConfig, artifacts_dir: Union[str, Path] = "artifacts",
                 web3: Optional[AsyncWeb3] = None):
        self.network = network
        self.artifacts_dir = Path(artifacts_dir)
        self.web3 = web3
        self.account = None
        self._owns_provider = web3 is None

    async def initialize(self):
        """Initialize Web3 connection and signer"""
        try:
            if self.web3 is None:
                self.web3 = AsyncWeb3(AsyncHTTPProvider(self.network.url))

            try:
                connected = await self.web3.is_connected()
            except aiohttp.ClientError as e:
                raise ConnectionError(
                    f"Failed to connect to {self.network.name}: {describe_transport_error(e)}"
                ) from None
            if not connected:
                raise ConnectionError(f"Failed to connect to {self.network.name}")

            # Set up account
            try:
                self.account = Account.from_key(self.network.accounts[0])
            except ValueError:
                raise DeploymentError("PRIVATE_KEY is not a valid private key") from None

            logger.info(f"Deployer initialized for {self.network.name}")
            logger.info(f"Account: {self.account.address}")

        except Exception as e:
            logger.error(f"Failed to initialize deployer: {e}")
            raise

    async def get_contract_factory(self, contract_name: str) -> "ContractFactory":
        """Resolve a compiled contract by name"""
        try:
            artifact = load_artifact(contract_name, self.artifacts_dir)
            return ContractFactory(self, artifact)
        except Exception as e:
            logger.error(f"Failed to load contract factory for {contract_name}: {e}")
            raise

    async def close(self):
        """Close the HTTP session of a provider created by this deployer"""
        if self._owns_provider and self.web3 is not None:
            await self.web3.provider.disconnect()
            logger.debug(f"Disconnected from {self.network.name}")

    def get_explorer_url(self, address: str) -> str:
        """Get explorer URL for a deployed contract"""
        return self.network.explorer_address_url(address)


class ContractFactory:
    def __init__(self, deployer: ContractDeployer, artifact: Artifact):
        self.deployer = deployer
        self.artifact = artifact

    @property
    def contract_name(self) -> str:
        return self.artifact.contract_name

    async def deploy(self, *constructor_args) -> "Deployment":
        """Sign and broadcast a contract creation transaction"""
        deployer = self.deployer
        if deployer.account is None:
            raise DeploymentError("Deployer is not initialized")

        web3 = deployer.web3
        address = deployer.account.address
        try:
            contract = web3.eth.contract(abi=self.artifact.abi, bytecode=self.artifact.bytecode)

            # Gas, fees and chain id are filled in by web3
            tx = await contract.constructor(*constructor_args).build_transaction({
                "from": address,
                "nonce": await web3.eth.get_transaction_count(address, "pending"),
            })

            signed_tx = web3.eth.account.sign_transaction(tx, private_key=deployer.account.key)
            tx_hash = await web3.eth.send_raw_transaction(signed_tx.raw_transaction)

            deployment = Deployment(self, to_hex(tx_hash))
            logger.info(f"{self.contract_name} deployment submitted: {deployment.tx_hash}")
            return deployment

        except aiohttp.ClientError as e:
            reason = describe_transport_error(e)
            logger.error(f"Failed to deploy {self.contract_name}: {reason}")
            raise ConnectionError(f"Failed to reach {deployer.network.name}: {reason}") from None
        except Exception as e:
            logger.error(f"Failed to deploy {self.contract_name}: {e}")
            raise


class Deployment:
    def __init__(self, factory: ContractFactory, tx_hash: str):
        self.factory = factory
        self.tx_hash = tx_hash
        self.receipt: Optional[Dict] = None

    async def wait_for_deployment(self) -> "Deployment":
        """Wait until the creation transaction is mined"""
        web3 = self.factory.deployer.web3
        try:
            receipt = await web3.eth.wait_for_transaction_receipt(self.tx_hash)
        except aiohttp.ClientError as e:
            reason = describe_transport_error(e)
            logger.error(f"Failed to get transaction receipt: {reason}")
            raise ConnectionError(
                f"Failed to reach {self.factory.deployer.network.name}: {reason}"
            ) from None
        except Exception as e:
            logger.error(f"Failed to get transaction receipt: {e}")
            raise

        if receipt["status"] != 1:
            raise TransactionRevertedError(self.tx_hash)

        self.receipt = receipt
        logger.info(f"{self.factory.contract_name} deployment confirmed in block {receipt['blockNumber']}")
        return self

    async def get_address(self) -> str:
        """Get the deployed contract address"""
        if self.receipt is None:
            await self.wait_for_deployment()
        return to_checksum_address(self.receipt["contractAddress"])
