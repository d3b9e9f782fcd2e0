"""Credit usage models."""

from pydantic import BaseModel, ConfigDict


class CreditUsageRecord(BaseModel):
    """Credit metadata attached to a single API response.

    Both fields are optional; endpoints that do not meter credits omit the
    ``account`` object entirely.
    """

    est_credits_used: int | None = None
    est_remaining_credits: int | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class AccountUsage(BaseModel):
    """Snapshot of the credit ledger for one client instance."""

    est_session_credits_used: int = 0
    est_remaining_credits: int | None = None

    model_config = ConfigDict(frozen=True)
