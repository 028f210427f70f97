"""
Policies Package - Running Fallible Operations Under a Policy.

    - ErrorPolicyRunner: configurable runner with injected side-effect ports
    - Module-level functions bound to a default runner
"""

from fallible.policies.defaults import (
    configure,
    exit_on_failure,
    file_on_failure,
    get_default_runner,
    log_on_failure,
    print_and,
    print_deferred,
    print_if,
    print_if_type,
    print_on_failure,
    print_optional,
    set_default_runner,
    silently,
    silently_and,
    silently_deferred,
    silently_optional,
    sleep,
)
from fallible.policies.runner import ErrorPolicyRunner

__all__ = [
    "ErrorPolicyRunner",
    "configure",
    "exit_on_failure",
    "file_on_failure",
    "get_default_runner",
    "log_on_failure",
    "print_and",
    "print_deferred",
    "print_if",
    "print_if_type",
    "print_on_failure",
    "print_optional",
    "set_default_runner",
    "silently",
    "silently_and",
    "silently_deferred",
    "silently_optional",
    "sleep",
]
