"""
Deployment Errors
"""

from typing import Optional


class ConfigurationError(Exception):
    """A required secret is missing or the network is unknown"""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class DeploymentError(Exception):
    """Raised while resolving, submitting or confirming a deployment"""


class ArtifactNotFoundError(DeploymentError):
    def __init__(self, contract_name: str, artifacts_dir: str):
        super().__init__(
            f"Artifact for {contract_name} not found in {artifacts_dir}. "
            f"Compile the contracts first using: npx hardhat compile"
        )
        self.contract_name = contract_name


class TransactionRevertedError(DeploymentError):
    def __init__(self, tx_hash: str):
        super().__init__(f"Deployment transaction reverted: {tx_hash}")
        self.tx_hash = tx_hash
