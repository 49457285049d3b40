#!/usr/bin/env python3
"""
Basic async chain walking with WalkChainLib.

This example demonstrates:
- Walking an org chart from an employee up to the top
- Awaiting a (simulated) remote lookup at every level
- Threading a value through the callbacks
"""

import asyncio
import sys
import time
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from walkchainlib.aio import walk_chain_call_async


ceo = {"name": "Ada", "title": "CEO"}
vp = {"name": "Grace", "title": "VP Engineering", "manager": ceo}
lead = {"name": "Linus", "title": "Team Lead", "manager": vp}
engineer = {"name": "Barbara", "title": "Engineer", "manager": lead}


async def record_approver(node, approvers, delay):
    """Pretend to look up each manager in a directory service."""
    await asyncio.sleep(delay)
    approvers = approvers or []
    print(f"  checked {node['name']} ({node['title']})")
    return approvers + [node["name"]]


async def main():
    print("Walking the management chain...")
    start = time.perf_counter()

    approvers = await walk_chain_call_async(engineer, "manager", record_approver, data=0.05)

    elapsed = time.perf_counter() - start
    print(f"\nApproval chain: {' -> '.join(approvers)}")
    print(f"Took {elapsed:.2f}s (each level waited for the previous one)")


if __name__ == "__main__":
    asyncio.run(main())
