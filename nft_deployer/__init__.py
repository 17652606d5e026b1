"""
NFT Deployer
Deploys a compiled contract to a test network and reports its address
"""

from nft_deployer.errors import (
    ArtifactNotFoundError,
    ConfigurationError,
    DeploymentError,
    TransactionRevertedError,
)

__all__ = [
    "ArtifactNotFoundError",
    "ConfigurationError",
    "DeploymentError",
    "TransactionRevertedError",
]
