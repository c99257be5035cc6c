"""
Path Helpers
Locates compiled contract binaries
"""

import os
from pathlib import Path
from typing import Optional


PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_BIN_DIR = PROJECT_ROOT / 'target' / 'wasm32-unknown-unknown' / 'release'


def bin_dir() -> Path:
    override = os.getenv('CONTRACT_BIN_DIR')
    return Path(override) if override else DEFAULT_BIN_DIR


def bin_path(name: str, directory: Optional[Path] = None) -> Path:
    """
    Path of a compiled contract

    Args:
        name: Contract crate name (e.g. "tenk")
        directory: Directory holding the .wasm files (default: CONTRACT_BIN_DIR or cargo release dir)

    Returns:
        Path to <name>.wasm
    """
    return Path(directory or bin_dir()) / f"{name}.wasm"
