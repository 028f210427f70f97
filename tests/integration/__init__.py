"""
Integration Tests - End-to-End Policy Tests.

These tests run the module-level policy functions with the real stderr
sink, working-directory file writer and sys.exit terminator.

Test Files:
    - test_policies_end_to_end.py: Success and failure paths of every policy
"""
