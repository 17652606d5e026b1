#!/usr/bin/env python3
"""
Contract Deployment Script
Deploys one compiled contract and prints its address
"""

import argparse
import asyncio
import logging
import os
import sys
import traceback
from typing import Callable, List, Mapping, Optional

from nft_deployer.config import DEFAULT_NETWORK, ProjectConfig, load_environment, load_project_config
from nft_deployer.contract_deployer import ContractDeployer
from nft_deployer.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONTRACT = "NFTst"


def resolve_log_level(name: Optional[str]) -> int:
    """Map a LOG_LEVEL value to a logging level, falling back to INFO"""
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging():
    """Configure logging"""
    logging.basicConfig(
        level=resolve_log_level(os.getenv("LOG_LEVEL")),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Deploy a compiled contract')
    parser.add_argument('--contract', default=DEFAULT_CONTRACT, help='Contract name to deploy')
    parser.add_argument('--network', default=DEFAULT_NETWORK, help='Target network')
    return parser.parse_args(argv)


async def run_deployment(contract_name: str, config: ProjectConfig,
                         deployer_factory: Callable = ContractDeployer) -> str:
    """Deploy a contract and return its address"""
    deployer = deployer_factory(config.network, config.artifacts)
    try:
        await deployer.initialize()

        factory = await deployer.get_contract_factory(contract_name)
        deployment = await factory.deploy()
        await deployment.wait_for_deployment()

        return await deployment.get_address()
    finally:
        await deployer.close()


def main(argv: Optional[List[str]] = None, env: Optional[Mapping[str, str]] = None,
         deployer_factory: Callable = ContractDeployer) -> int:
    """Main function"""
    args = parse_args(argv)
    if env is None:
        load_environment()
    setup_logging()

    try:
        config = load_project_config(env, network=args.network)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    try:
        address = asyncio.run(run_deployment(args.contract, config, deployer_factory))
    except KeyboardInterrupt:
        logger.info("Deployment interrupted by user")
        return 1
    except Exception:
        traceback.print_exc()
        return 1

    print(f"{args.contract} deployed to: {address}")
    print(f"Explorer URL: {config.network.explorer_address_url(address)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
