"""
Unit Tests - Testing Individual Components in Isolation.

Each policy is tested against a runner whose sink, file writer and
terminator are in-memory or mocked.

Test Files:
    - test_silent_policies.py: silent, fallback, optional and deferred variants
    - test_print_policies.py: print variants
    - test_log_file_exit_policies.py: logger, file and exit policies
    - test_sleep.py: interruptible sleep
    - test_adapters.py: stream sink, file writer, terminator
    - test_config_loader.py: Configuration loading/validation
"""
