#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only tests that need no database at all
    python -m pytest tests/ -v -m "not db"

Database-backed tests use an in-memory SQLite engine (see conftest.py), so no
external PostgreSQL is needed.
"""
