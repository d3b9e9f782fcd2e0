"""Unit tests for the credit ledger."""

from __future__ import annotations

import asyncio
import threading

import pytest

from parcl.labs.models import AccountUsage, CreditUsageRecord
from parcl.labs.runtime.ledger import CreditLedger


class TestCreditLedger:
    """Test credit accumulation rules."""

    def test_starts_empty(self):
        ledger = CreditLedger()
        assert ledger.session_used() == 0
        assert ledger.remaining() is None
        assert ledger.records == 0

    def test_used_is_summed_remaining_is_latest(self):
        ledger = CreditLedger()
        ledger.record(CreditUsageRecord(est_credits_used=1, est_remaining_credits=99))
        ledger.record(CreditUsageRecord(est_credits_used=2, est_remaining_credits=97))
        ledger.record(CreditUsageRecord(est_credits_used=3, est_remaining_credits=94))

        assert ledger.session_used() == 6
        assert ledger.remaining() == 94
        assert ledger.records == 3

    def test_none_record_is_ignored(self):
        ledger = CreditLedger()
        ledger.record(None)
        assert ledger.records == 0

    def test_partial_records(self):
        ledger = CreditLedger()
        ledger.record(CreditUsageRecord(est_remaining_credits=50))
        ledger.record(CreditUsageRecord(est_credits_used=4))

        assert ledger.session_used() == 4
        assert ledger.remaining() == 50

    def test_remaining_may_increase(self):
        ledger = CreditLedger()
        ledger.record(CreditUsageRecord(est_credits_used=1, est_remaining_credits=10))
        ledger.record(CreditUsageRecord(est_credits_used=1, est_remaining_credits=1000))
        assert ledger.remaining() == 1000

    def test_snapshot(self):
        ledger = CreditLedger()
        ledger.record(CreditUsageRecord(est_credits_used=5, est_remaining_credits=20))

        assert ledger.snapshot() == AccountUsage(
            est_session_credits_used=5, est_remaining_credits=20
        )

    def test_threaded_updates_are_not_lost(self):
        ledger = CreditLedger()
        record = CreditUsageRecord(est_credits_used=1)

        def worker():
            for _ in range(1000):
                ledger.record(record)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert ledger.session_used() == 8000
        assert ledger.records == 8000

    @pytest.mark.asyncio
    async def test_concurrent_tasks_sum_exactly(self):
        ledger = CreditLedger()

        async def call(used: int):
            await asyncio.sleep(0)
            ledger.record(CreditUsageRecord(est_credits_used=used))

        await asyncio.gather(*(call(n) for n in range(1, 101)))

        assert ledger.session_used() == sum(range(1, 101))
