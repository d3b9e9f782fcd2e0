"""Session-scoped credit accounting.

Architecture:
    One ledger is owned by each client instance and shared by reference with
    the paging layer. It is the only mutable state shared between concurrent
    logical calls, so every update happens under a lock. The ledger reflects
    responses actually received: a call that later fails or is cancelled
    keeps the credits its earlier pages already reported.
"""

from __future__ import annotations

import logging
import threading

from ..models.account import AccountUsage, CreditUsageRecord

logger = logging.getLogger(__name__)


class CreditLedger:
    """Accumulates credit usage reported by API responses."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._session_used = 0
        self._remaining: int | None = None
        self._records = 0

    def record(self, usage: CreditUsageRecord | None) -> None:
        """Fold one response's credit record into the running totals.

        ``est_credits_used`` is summed; ``est_remaining_credits`` is a snapshot
        of account state, so the latest value wins.
        """
        if usage is None:
            return
        with self._lock:
            if usage.est_credits_used is not None:
                self._session_used += usage.est_credits_used
            if usage.est_remaining_credits is not None:
                self._remaining = usage.est_remaining_credits
            self._records += 1
            session_used = self._session_used
            remaining = self._remaining

        logger.debug(
            "credits_recorded",
            extra={
                "credits_used": usage.est_credits_used,
                "session_used": session_used,
                "remaining": remaining,
            },
        )

    def session_used(self) -> int:
        """Total credits consumed by this client since construction."""
        with self._lock:
            return self._session_used

    def remaining(self) -> int | None:
        """Most recently reported remaining credits, if any response carried it."""
        with self._lock:
            return self._remaining

    @property
    def records(self) -> int:
        """Number of credit records folded in."""
        with self._lock:
            return self._records

    def snapshot(self) -> AccountUsage:
        with self._lock:
            return AccountUsage(
                est_session_credits_used=self._session_used,
                est_remaining_credits=self._remaining,
            )
