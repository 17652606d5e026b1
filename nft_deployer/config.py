"""
Project Configuration
Reads deployment secrets from the environment and builds the network settings
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from nft_deployer.errors import ConfigurationError

logger = logging.getLogger(__name__)

ALCHEMY_API_KEY_ENV = "ALCHEMY_API_KEY"
PRIVATE_KEY_ENV = "PRIVATE_KEY"
REQUIRED_SECRETS = (ALCHEMY_API_KEY_ENV, PRIVATE_KEY_ENV)

SOLIDITY_VERSION = "0.8.28"
DEFAULT_NETWORK = "sepolia"

# Network configurations
NETWORKS = {
    "sepolia": {
        "url": "https://eth-sepolia.g.alchemy.com/v2/{api_key}",
        "chain_id": 11155111,
        "explorer": "https://sepolia.etherscan.io",
    }
}


def _mask(value: str) -> str:
    return "***" if value else ""


@dataclass(frozen=True)
class Secrets:
    api_key: str
    private_key: str

    def __repr__(self):
        return f"Secrets(api_key={_mask(self.api_key)}, private_key={_mask(self.private_key)})"


@dataclass(frozen=True)
class NetworkConfig:
    """Endpoint and signer used to reach one network"""

    name: str
    url: str
    accounts: Tuple[str, ...]
    chain_id: int
    explorer: str

    def __repr__(self):
        return (
            f"NetworkConfig(name={self.name!r}, chain_id={self.chain_id}, "
            f"accounts=[{len(self.accounts)} key(s)])"
        )

    def explorer_address_url(self, address: str) -> str:
        return f"{self.explorer}/address/{address}"


@dataclass(frozen=True)
class ProjectConfig:
    """Compiler version, build paths and the target network

    Mirrors the Hardhat project config. The deploy command reads only
    ``network`` and ``artifacts``; ``solidity``, ``sources`` and ``cache``
    describe the build that produced the artifacts and are not used here.
    """

    network: NetworkConfig
    solidity: str = SOLIDITY_VERSION
    sources: Path = Path("./contracts")
    artifacts: Path = Path("./artifacts")
    cache: Path = Path("./cache")
    networks: Dict[str, NetworkConfig] = field(default_factory=dict)


def load_environment(env_file: Optional[str] = None) -> bool:
    """Load the secrets file into the process environment

    Variables already set in the environment are not overridden.
    """
    loaded = load_dotenv(env_file or find_dotenv(usecwd=True), override=False)
    if loaded:
        logger.debug("Loaded secrets file")
    return loaded


def require_secrets(env: Optional[Mapping[str, str]] = None) -> Secrets:
    """Check that every required secret is present and non-empty

    Fails on the first missing key, before any network settings are built.
    Only the presence of a secret is logged, never its value.
    """
    if env is None:
        env = os.environ

    values = {}
    for key in REQUIRED_SECRETS:
        value = env.get(key)
        if not value:
            raise ConfigurationError(f"{key} is not set in .env file", key=key)
        values[key] = value

    for key in REQUIRED_SECRETS:
        logger.info(f"{key}: Loaded")

    return Secrets(
        api_key=values[ALCHEMY_API_KEY_ENV],
        private_key=values[PRIVATE_KEY_ENV],
    )


def build_network_config(secrets: Secrets, network: str = DEFAULT_NETWORK) -> NetworkConfig:
    """Assemble the endpoint URL and signer list for a network"""
    if network not in NETWORKS:
        raise ConfigurationError(f"Unsupported network: {network}")

    config = NETWORKS[network]
    return NetworkConfig(
        name=network,
        url=config["url"].format(api_key=secrets.api_key),
        accounts=(secrets.private_key,),
        chain_id=config["chain_id"],
        explorer=config["explorer"],
    )


def load_project_config(
    env: Optional[Mapping[str, str]] = None,
    root: Optional[Path] = None,
    network: str = DEFAULT_NETWORK,
) -> ProjectConfig:
    """Validate secrets and build the full project configuration"""
    secrets = require_secrets(env)
    network_config = build_network_config(secrets, network)

    root = Path(root) if root is not None else Path.cwd()
    return ProjectConfig(
        network=network_config,
        sources=root / "contracts",
        artifacts=root / "artifacts",
        cache=root / "cache",
        networks={network_config.name: network_config},
    )
