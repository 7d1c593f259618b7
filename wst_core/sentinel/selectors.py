# wst_core/sentinel/selectors.py
"""
Platform-wide read models for the sentinel zone. Nothing here is tenant-scoped.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from django.contrib.sessions.models import Session
from django.db.models import Count
from django.db.models.functions import TruncDate
from django.utils import timezone
from rest_framework.exceptions import ValidationError

from wst_core.common.dates import add_months, add_years, iter_days

LOGIN_PERIODS = ("day", "week", "month", "year", "custom")
DEFAULT_LOGIN_PERIOD = "week"


def platform_stats(*, on: Optional[date] = None) -> dict:
    from wst_core.clients.models import Cliente
    from wst_core.employees.models import Employee, EmployeeStatus
    from wst_core.shifts.models import Shift

    on = on or timezone.localdate()
    return {
        "totalEmployees": Employee.objects.filter(status=EmployeeStatus.ACTIVE).count(),
        "totalClients": Cliente.objects.alive().count(),
        "totalShiftsLast30Days": Shift.objects.filter(date__gte=on - timedelta(days=30)).count(),
    }


@dataclass(frozen=True)
class ActiveSession:
    session_id: str
    username: str
    role: str
    company_name: Optional[str]
    expire: object


def _truncate_key(key: str) -> str:
    return f"{key[:8]}..."


def active_sessions() -> list[ActiveSession]:
    """
    Unexpired sessions that still point at an existing user, soonest expiry first.
    """
    from wst_core.iam.auth import SESSION_USER_ID
    from wst_core.iam.models import User

    rows = []
    for session in Session.objects.filter(expire_date__gt=timezone.now()).order_by("expire_date"):
        user_id = session.get_decoded().get(SESSION_USER_ID)
        if user_id:
            rows.append((session, user_id))

    users = User.objects.select_related("main_company").in_bulk({user_id for _, user_id in rows})

    out = []
    for session, user_id in rows:
        user = users.get(user_id)
        if user is None:
            continue
        out.append(
            ActiveSession(
                session_id=_truncate_key(session.session_key),
                username=user.username,
                role=user.role.replace("_", " "),
                company_name=user.main_company.name if user.main_company else None,
                expire=session.expire_date,
            )
        )
    return out


def login_window(
    *,
    period: str,
    start: Optional[date] = None,
    end: Optional[date] = None,
    today: Optional[date] = None,
) -> tuple[date, date]:
    """
    Inclusive day range for the login chart.

    The anchor is `start` when given, else today. The window ends on the anchor and
    reaches back one week / month / year (or starts on it for `day`).
    `custom` uses start..end as given.
    """
    if period == "custom":
        if start is None or end is None:
            raise ValidationError({"startDate": "startDate and endDate are required for a custom period."})
        if start > end:
            raise ValidationError({"startDate": "startDate must be on or before endDate."})
        return start, end

    anchor = start or today or timezone.localdate()
    if period == "week":
        return anchor - timedelta(weeks=1), anchor
    if period == "month":
        return add_months(anchor, -1), anchor
    if period == "year":
        return add_years(anchor, -1), anchor
    return anchor, anchor


def login_history(*, start: date, end: date) -> list[dict]:
    """
    Daily login counts over [start, end], one entry per day including empty ones.
    """
    from wst_core.iam.models import LoginHistory

    counts = (
        LoginHistory.objects.filter(login_timestamp__date__gte=start, login_timestamp__date__lte=end)
        .annotate(day=TruncDate("login_timestamp"))
        .values("day")
        .annotate(logins=Count("id"))
    )
    by_day = {row["day"]: row["logins"] for row in counts}
    return [{"date": day.isoformat(), "logins": by_day.get(day, 0)} for day in iter_days(start, end)]
