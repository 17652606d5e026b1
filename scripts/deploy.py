#!/usr/bin/env python3
"""
NFTst Deployment Script

Usage:
    npx hardhat compile
    python scripts/deploy.py
"""

import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from nft_deployer.cli import main

if __name__ == "__main__":
    sys.exit(main())
