#!/usr/bin/env python3
"""
Test runner for the feed builder.
Runs all tests and provides a summary report.
"""

import unittest
import sys
from pathlib import Path
import time

# Add project root to path
project_root = Path(__file__).parent.parent.absolute()
sys.path.insert(0, str(project_root))

TEST_GROUPS = {
    'unit': [
        'tests.test_catalog_client',
        'tests.test_config',
        'tests.test_feed_builder',
        'tests.test_feed_writer',
        'tests.test_models',
    ],
    'integration': [
        'tests.test_feed_controller',
        'tests.test_cli',
    ],
}


def run_test_suite(test_type='all'):
    """Run the test suite and return whether it passed."""
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()

    for group, modules in TEST_GROUPS.items():
        if test_type in ('all', group):
            print(f"Adding {group} tests...")
            for module in modules:
                suite.addTest(loader.loadTestsFromName(module))

    runner = unittest.TextTestRunner(verbosity=2)
    start_time = time.time()
    result = runner.run(suite)
    end_time = time.time()

    print("\n" + "="*60)
    print("TEST SUMMARY")
    print("="*60)
    print(f"Tests run: {result.testsRun}")
    print(f"Failures: {len(result.failures)}")
    print(f"Errors: {len(result.errors)}")
    if result.testsRun:
        passed = result.testsRun - len(result.failures) - len(result.errors)
        print(f"Success rate: {passed / result.testsRun * 100:.1f}%")
    print(f"Execution time: {end_time - start_time:.2f} seconds")
    print("="*60)

    return result.wasSuccessful()


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Run feed builder tests')
    parser.add_argument('--type', choices=['all', 'unit', 'integration'],
                        default='all',
                        help='Type of tests to run (default: all)')

    args = parser.parse_args()

    print("MANGACROSS-RSS TEST SUITE")
    print(f"Running {args.type} tests...")
    print("="*50)

    success = run_test_suite(args.type)
    sys.exit(0 if success else 1)
