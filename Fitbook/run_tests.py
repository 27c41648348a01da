"""
Test runner script for the Fitbook API
Run specific test suites or all tests
"""

import os
import sys
import django
from django.conf import settings
from django.test.utils import get_runner

if __name__ == "__main__":
    os.environ['DJANGO_SETTINGS_MODULE'] = 'Fitbook.settings'
    django.setup()
    TestRunner = get_runner(settings)
    test_runner = TestRunner()

    # Available test suites
    test_suites = {
        'user': 'user.tests',
        'scheduling': 'classes.tests.test_scheduling',
        'classes': 'classes.tests',
        'booking': 'booking.tests',
        'ledger': 'ledger.tests',
        'gateway': 'payment.tests.test_gateway',
        'reconciliation': 'payment.tests.test_reconciliation',
        'payment': 'payment.tests',
        'core': 'core.tests',
    }
    all_suites = ['core.tests', 'user.tests', 'classes.tests', 'booking.tests', 'ledger.tests', 'payment.tests']

    if len(sys.argv) > 1:
        test_name = sys.argv[1]
        if test_name in test_suites:
            failures = test_runner.run_tests([test_suites[test_name]])
        else:
            print(f"Available test suites: {list(test_suites.keys())}")
            sys.exit(1)
    else:
        # Run all tests
        failures = test_runner.run_tests(all_suites)

    if failures:
        sys.exit(1)
