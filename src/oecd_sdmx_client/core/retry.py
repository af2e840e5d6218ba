"""Retry helpers and the per-request retry state machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RetryState(str, Enum):
    ATTEMPTING = "attempting"
    BACKOFF = "backoff"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"


class Outcome(str, Enum):
    """Classification of a single attempt."""

    SUCCESS = "success"
    SERVER_ERROR = "server_error"
    TIMEOUT = "timeout"
    NETWORK = "network"
    PERMANENT = "permanent"


_TRANSIENT_OUTCOMES = frozenset({Outcome.SERVER_ERROR, Outcome.TIMEOUT, Outcome.NETWORK})


def is_transient_outcome(outcome: Outcome) -> bool:
    return outcome in _TRANSIENT_OUTCOMES


def next_backoff_seconds(*, attempt_index: int, initial_delay_seconds: float) -> float:
    """Exponential backoff: ``initial * 2**attempt_index``.

    attempt_index: 0-based retry index.
    """

    if initial_delay_seconds <= 0:
        return 0.0
    return float(initial_delay_seconds) * float(2**attempt_index)


@dataclass(slots=True, frozen=True)
class RetryAttempt:
    attempt_number: int
    classification: Outcome
    delay_before_next: float | None


class RetryStateMachine:
    """Attempting -> Succeeded | Backoff -> Attempting | Exhausted.

    ``max_retries`` counts retries, so at most ``max_retries + 1`` attempts run.
    """

    def __init__(self, *, max_retries: int, initial_delay_seconds: float) -> None:
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self._max_retries = max_retries
        self._initial_delay_seconds = initial_delay_seconds
        self._state = RetryState.ATTEMPTING
        self._attempt = 0
        self._history: list[RetryAttempt] = []

    @property
    def state(self) -> RetryState:
        return self._state

    @property
    def attempt(self) -> int:
        """0-based index of the current (or last) attempt."""

        return self._attempt

    @property
    def history(self) -> tuple[RetryAttempt, ...]:
        return tuple(self._history)

    def record(self, outcome: Outcome) -> RetryAttempt:
        if self._state is not RetryState.ATTEMPTING:
            raise RuntimeError(f"cannot record an outcome in state {self._state.value}")

        delay: float | None = None
        if outcome is Outcome.SUCCESS:
            self._state = RetryState.SUCCEEDED
        elif is_transient_outcome(outcome) and self._attempt < self._max_retries:
            delay = next_backoff_seconds(
                attempt_index=self._attempt,
                initial_delay_seconds=self._initial_delay_seconds,
            )
            self._state = RetryState.BACKOFF
        else:
            self._state = RetryState.EXHAUSTED

        attempt = RetryAttempt(
            attempt_number=self._attempt + 1,
            classification=outcome,
            delay_before_next=delay,
        )
        self._history.append(attempt)
        return attempt

    def resume(self) -> None:
        """Leave Backoff once the delay has elapsed."""

        if self._state is not RetryState.BACKOFF:
            raise RuntimeError(f"cannot resume from state {self._state.value}")
        self._attempt += 1
        self._state = RetryState.ATTEMPTING


__all__ = [
    "RetryState",
    "Outcome",
    "is_transient_outcome",
    "next_backoff_seconds",
    "RetryAttempt",
    "RetryStateMachine",
]
