"""
ClipDeck Test Suite.

This package contains all tests for ClipDeck:

- unit/: Normalizer, adapter, controller, queue store, formatters and CLI tests
- integration/: Search proxy endpoint and end-to-end search flow tests
- conftest.py: Shared fixtures and test configuration

Run tests with: pytest
"""
