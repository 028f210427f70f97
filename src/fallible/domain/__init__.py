"""
Domain Layer - Callable Types and Results.

Types:
    - FallibleOperation / ValueProducer / RecoveryAction: zero-argument callables
    - Outcome: Success or Failure of one attempt (internal discriminated result)
    - PolicyResult: present or absent value returned by the optional policies

Design Principles:
    - Immutable (frozen dataclasses)
    - No infrastructure dependencies
"""

from fallible.domain.outcome import (
    DeferredAction,
    Failure,
    FallibleOperation,
    Outcome,
    RecoveryAction,
    Success,
    ValueProducer,
    attempt,
)
from fallible.domain.policy_result import PolicyResult

__all__ = [
    "DeferredAction",
    "Failure",
    "FallibleOperation",
    "Outcome",
    "PolicyResult",
    "RecoveryAction",
    "Success",
    "ValueProducer",
    "attempt",
]
