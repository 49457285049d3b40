#!/usr/bin/env python3
"""
Configuration inheritance with WalkChainLib.

This example demonstrates:
- Merging settings across a chain of profiles linked by name
- Nearer profiles overriding inherited values
- Safe handling of a profile that accidentally inherits from itself
"""

import sys
from pathlib import Path
from pprint import pprint

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from walkchainlib.sync import iter_chain_by_id, walk_chain_id_merge


PROFILES = [
    {"name": "defaults", "settings": {"timeout": 30, "retries": 3, "log_level": "INFO"}},
    {"name": "production", "extends": "defaults", "settings": {"retries": 5}},
    {"name": "eu-west", "extends": "production", "settings": {"region": "eu-west-1"}},
    {"name": "eu-west-debug", "extends": "eu-west", "settings": {"log_level": "DEBUG"}},
    {"name": "loop", "extends": "loop", "settings": {"timeout": 1}},
]


def shallow_merge(inherited, own):
    """Own keys win over inherited keys."""
    return {**inherited, **own}


def profile(name):
    return next(p for p in PROFILES if p["name"] == name)


def main():
    for name in ("eu-west-debug", "production", "loop"):
        start = profile(name)
        chain = [p["name"] for p in iter_chain_by_id(start, PROFILES, "extends", "name")]
        settings = walk_chain_id_merge(start, PROFILES, "extends", "name", "settings", shallow_merge)

        print(f"\n{name}: {' -> '.join(chain)}")
        pprint(settings)


if __name__ == "__main__":
    main()
