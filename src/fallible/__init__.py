"""
Fallible - Error-Handling Policies for Fallible Operations.

Wraps zero-argument callables that may raise with a named policy: ignore
the error, print it, log it, write it to a file, exit, print conditionally,
run a fallback, or return an optional-style result.

Main Components:
    - policies: ErrorPolicyRunner and module-level policy functions
    - domain: PolicyResult and the internal Success/Failure outcome
    - interfaces: Protocols for the sink, file writer and terminator
    - adapters: stderr, timestamped file and sys.exit implementations
    - config: Pydantic models and YAML loader

Example:
    >>> import fallible
    >>> fallible.print_on_failure(lambda: open("missing.txt").read())
    >>> fallible.silently_optional(lambda: 6 * 7)
    PolicyResult.present(42)

"""

import logging

from fallible.config import PolicyConfig, load_config
from fallible.domain import PolicyResult
from fallible.errors import (
    AbsentResultError,
    ConfigError,
    FallibleError,
    RecoveryFailedError,
    SleepInterruptedError,
)
from fallible.policies import (
    ErrorPolicyRunner,
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

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for fallible.

    Absorbed failures are logged at DEBUG on the "fallible" logger;
    they stay invisible until this (or equivalent) is called.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import fallible
        >>> fallible.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("fallible").setLevel(level)


__all__ = [
    "AbsentResultError",
    "ConfigError",
    "ErrorPolicyRunner",
    "FallibleError",
    "PolicyConfig",
    "PolicyResult",
    "RecoveryFailedError",
    "SleepInterruptedError",
    "configure",
    "configure_logging",
    "exit_on_failure",
    "file_on_failure",
    "get_default_runner",
    "load_config",
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
