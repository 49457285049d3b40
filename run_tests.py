#!/usr/bin/env python
"""
Simple Test Runner for WalkChainLib
===================================

Runs the test suite with short tracebacks and the slowest tests listed.

Usage:
    python run_tests.py           # Run all tests
    python run_tests.py --cov     # Run all tests with a coverage report
    python run_tests.py -k merge  # Run tests matching an expression
"""

import subprocess
import sys
import argparse
from pathlib import Path


def run_tests(coverage=False, keyword=None):
    """Run the test suite."""
    cmd = [
        sys.executable, "-m", "pytest",
        "tests",
        "--tb=short",               # Short traceback format
        "--durations=10",           # Show 10 slowest tests
        "-v"                        # Verbose output
    ]

    if coverage:
        cmd.extend(["--cov=walkchainlib", "--cov-report=term-missing"])

    if keyword:
        cmd.extend(["-k", keyword])

    print("Running WalkChainLib tests...")
    print("=" * 60)

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(description="Test runner for WalkChainLib")
    parser.add_argument("--cov", action="store_true", help="Report coverage (needs pytest-cov)")
    parser.add_argument("-k", dest="keyword", help="Only run tests matching this expression")

    args = parser.parse_args()

    return run_tests(coverage=args.cov, keyword=args.keyword)


if __name__ == "__main__":
    sys.exit(main())
