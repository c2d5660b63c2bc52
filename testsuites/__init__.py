"""
Test suites package.

This repository intentionally keeps `testsuites` importable to support:
  - shared fakes (`testsuites.unit.fakes`) imported by test modules
  - programmatic runners (e.g., `run_tests.py`)
  - IDE navigation
"""
