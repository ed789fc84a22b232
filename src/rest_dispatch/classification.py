"""OutcomeCategory enum and status classification."""

from __future__ import annotations

from enum import Enum


class OutcomeCategory(Enum):
    """Terminal categories a dispatch can end in."""

    SUCCESS = "success"
    ABORTED = "aborted"
    NOT_FOUND = "not_found"
    REJECTED = "rejected"
    AUTH_REQUIRED = "auth_required"
    ALERT = "alert"

    @property
    def is_failure(self) -> bool:
        return self is not OutcomeCategory.SUCCESS


# No response, or the request was aborted client-side
ABORTED_STATUSES = frozenset({0, -1})
AUTH_STATUSES = frozenset({401, 403})
NOT_FOUND_STATUS = 404
PRECONDITION_FAILED_STATUS = 412


def classify(status: int) -> OutcomeCategory:
    """Map a failed response status to its category.

    Only called for failures; success is decided by the transport.
    """
    if status in ABORTED_STATUSES:
        return OutcomeCategory.ABORTED
    if status == NOT_FOUND_STATUS:
        return OutcomeCategory.NOT_FOUND
    if status == PRECONDITION_FAILED_STATUS:
        return OutcomeCategory.REJECTED
    if status in AUTH_STATUSES:
        return OutcomeCategory.AUTH_REQUIRED
    return OutcomeCategory.ALERT
