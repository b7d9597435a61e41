#!/usr/bin/env python3
"""
Test suite.

    # Run all tests
    python -m pytest tests/ -v

    # Run only tests that do not touch a database
    python -m pytest tests/ -v -m "not db"

Database tests use an in-memory SQLite database (see conftest.py);
no external services are needed.
"""
