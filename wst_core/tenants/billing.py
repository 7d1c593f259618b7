# wst_core/tenants/billing.py
"""
Subscription status of a tenant.

Pure calendar-day arithmetic on {is_active, payment_control, last_payment_date}:

  - no payment recorded          -> not current
  - permanent                    -> current, no due date
  - monthly / annual             -> due = last payment + 1 month / 1 year,
                                    current while today <= due (the due day itself counts)
  - final active                 = manual is_active AND current
  - due soon                     = active AND 0 <= days until due <= 5
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from django.utils import timezone

from wst_core.common.dates import add_months, add_years
from wst_core.tenants.models import PaymentControl

DUE_SOON_DAYS = 5


@dataclass(frozen=True)
class CompanyStatus:
    is_active: bool
    payment_control: str
    last_payment_date: Optional[date]
    next_payment_due_date: Optional[date]
    is_payment_due_soon: bool
    needs_setup: bool

    def as_payload(self) -> dict[str, Any]:
        return {
            "isActive": self.is_active,
            "paymentControl": self.payment_control,
            "lastPaymentDate": self.last_payment_date.isoformat() if self.last_payment_date else None,
            "nextPaymentDueDate": self.next_payment_due_date.isoformat() if self.next_payment_due_date else None,
            "isPaymentDueSoon": self.is_payment_due_soon,
            "needsSetup": self.needs_setup,
        }


def today() -> date:
    return timezone.localdate()


def _as_calendar_date(value) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # "YYYY-MM-DD" read as a plain calendar date, no timezone shift
    return date.fromisoformat(str(value)[:10])


def next_due_date(*, payment_control: str, last_payment_date: Optional[date]) -> Optional[date]:
    if last_payment_date is None:
        return None
    if payment_control == PaymentControl.MONTHLY:
        return add_months(last_payment_date, 1)
    if payment_control == PaymentControl.ANNUAL:
        return add_years(last_payment_date, 1)
    return None


def evaluate_subscription(
    *,
    is_active: bool,
    payment_control: str,
    last_payment_date,
    on: date,
    needs_setup: bool = False,
) -> CompanyStatus:
    last_paid = _as_calendar_date(last_payment_date)
    due = next_due_date(payment_control=payment_control, last_payment_date=last_paid)

    if last_paid is None:
        payment_current = False
    elif payment_control == PaymentControl.PERMANENT:
        payment_current = True
    elif payment_control in (PaymentControl.MONTHLY, PaymentControl.ANNUAL):
        payment_current = on <= due
    else:
        payment_current = False

    active = bool(is_active) and payment_current

    due_soon = False
    if active and due is not None:
        days_left = (due - on).days
        due_soon = 0 <= days_left <= DUE_SOON_DAYS

    return CompanyStatus(
        is_active=active,
        payment_control=payment_control,
        last_payment_date=last_paid,
        next_payment_due_date=due,
        is_payment_due_soon=due_soon,
        needs_setup=bool(needs_setup),
    )


def company_status_for(company, *, on: Optional[date] = None) -> CompanyStatus:
    return evaluate_subscription(
        is_active=company.is_active,
        payment_control=company.payment_control,
        last_payment_date=company.last_payment_date,
        needs_setup=company.needs_setup,
        on=on or today(),
    )


def payment_is_current(company, *, on: Optional[date] = None) -> bool:
    """
    Date-based part only, ignoring the manual flag. Login reports the two causes separately.
    """
    status = evaluate_subscription(
        is_active=True,
        payment_control=company.payment_control,
        last_payment_date=company.last_payment_date,
        on=on or today(),
    )
    return status.is_active
