#!/usr/bin/env python3
"""
Test runner script for the Genius client project.

This script runs all tests (or the tests under one path) and provides a
summary of results.
"""

import sys
import unittest
from pathlib import Path


def discover_and_run_tests(pattern: str = "test_*.py", start: str = "tests") -> bool:
    """Discover and run all tests below ``start``."""
    script_dir = Path(__file__).parent
    start_dir = script_dir / start

    if not start_dir.exists():
        print(f"Tests directory not found: {start_dir}")
        return False

    # Make the package importable without installing it
    if str(script_dir) not in sys.path:
        sys.path.insert(0, str(script_dir))

    loader = unittest.TestLoader()
    suite = loader.discover(str(start_dir), pattern=pattern, top_level_dir=str(script_dir))

    print("\n" + "=" * 70)
    print("RUNNING TESTS")
    print("=" * 70)

    runner = unittest.TextTestRunner(
        verbosity=2,
        stream=sys.stdout,
        descriptions=True,
        failfast=False,
    )
    result = runner.run(suite)

    # Print summary
    print("\n" + "=" * 70)
    print("TEST SUMMARY")
    print("=" * 70)
    print(f"Tests run: {result.testsRun}")
    print(f"Failures: {len(result.failures)}")
    print(f"Errors: {len(result.errors)}")
    print(f"Skipped: {len(result.skipped)}")

    success = result.wasSuccessful()
    print(f"\nOverall result: {'PASSED' if success else 'FAILED'}")

    return success


def main():
    """Main entry point for the test runner."""
    if len(sys.argv) > 1:
        # Run tests below a specific directory, e.g. "tests/core"
        start = sys.argv[1]
        print(f"Running tests from {start}")
        success = discover_and_run_tests(start=start)
    else:
        print("Running all tests...")
        success = discover_and_run_tests()

    sys.exit(0 if success else 1)


if __name__ == '__main__':
    main()
