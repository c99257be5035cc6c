"""
Contract Deployment Entry Point
Deploys the TenK NFT contract: python deploy.py [contract_id]
"""

import sys

from deployer.cli import main

if __name__ == "__main__":
    print("=" * 70)
    print("TenK Contract Deployment")
    print("=" * 70)
    print()

    sys.exit(main())
