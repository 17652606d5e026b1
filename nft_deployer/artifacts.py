"""
Build Artifacts
Resolves compiled contracts from the Hardhat artifacts directory
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Union

from nft_deployer.errors import ArtifactNotFoundError, DeploymentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Artifact:
    contract_name: str
    source_name: str
    abi: List[Dict]
    bytecode: str


def _find_artifact_files(contract_name: str, contracts_dir: Path) -> List[Path]:
    if ":" in contract_name:
        # Fully qualified name, e.g. contracts/NFTst.sol:NFTst
        source, name = contract_name.rsplit(":", 1)
        source = source[len("contracts/"):] if source.startswith("contracts/") else source
        path = contracts_dir / source / f"{name}.json"
        return [path] if path.is_file() else []

    return sorted(
        p for p in contracts_dir.rglob(f"{contract_name}.json")
        if not p.name.endswith(".dbg.json")
    )


def load_artifact(contract_name: str, artifacts_dir: Union[str, Path]) -> Artifact:
    """Load a contract's ABI and bytecode by name"""
    artifacts_dir = Path(artifacts_dir)
    contracts_dir = artifacts_dir / "contracts"
    if not contracts_dir.is_dir():
        raise ArtifactNotFoundError(contract_name, str(artifacts_dir))

    matches = _find_artifact_files(contract_name, contracts_dir)
    if not matches:
        raise ArtifactNotFoundError(contract_name, str(artifacts_dir))
    if len(matches) > 1:
        sources = ", ".join(str(p.parent.relative_to(artifacts_dir)) for p in matches)
        raise DeploymentError(
            f"Multiple artifacts for {contract_name} ({sources}). "
            f"Use a fully qualified name like contracts/{contract_name}.sol:{contract_name}"
        )

    path = matches[0]
    try:
        with open(path, 'r') as f:
            data = json.load(f)
        abi = data["abi"]
        bytecode = data["bytecode"]
    except (json.JSONDecodeError, KeyError) as e:
        raise DeploymentError(f"Invalid artifact {path}: {e}") from e

    if not bytecode or bytecode == "0x":
        raise DeploymentError(
            f"{contract_name} has no bytecode; abstract contracts and interfaces cannot be deployed"
        )

    logger.info(f"Loaded artifact for {data.get('contractName', contract_name)} from {path}")
    return Artifact(
        contract_name=data.get("contractName", contract_name),
        source_name=data.get("sourceName", ""),
        abi=abi,
        bytecode=bytecode,
    )
