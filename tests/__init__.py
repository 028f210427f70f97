"""
Test Suite for fallible.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Module-level functions with the real adapters
    - fixtures/: Shared error classes and sample configuration

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
