# wst_core/iam/auth.py
from __future__ import annotations

import logging

from rest_framework.authentication import BaseAuthentication

from wst_core.common.context import RequestContext

logger = logging.getLogger(__name__)

# Session payload written at login.
SESSION_USER_ID = "user_id"
SESSION_ROLE = "role"
SESSION_MAIN_COMPANY_ID = "main_company_id"
SESSION_PENDING_PASSWORD_CHANGE = "is_pending_password_change"


def start_session(request, user, *, max_age: int) -> None:
    """
    Binds the authenticated user to a fresh session key and sets its lifetime (seconds).
    """
    session = request.session
    session.cycle_key()
    session[SESSION_USER_ID] = user.id
    session[SESSION_ROLE] = user.role
    session[SESSION_MAIN_COMPANY_ID] = user.main_company_id
    session[SESSION_PENDING_PASSWORD_CHANGE] = bool(user.must_change_password)
    session.set_expiry(max_age)


def end_session(request) -> None:
    # flush() deletes the row; SessionMiddleware then expires the cookie.
    request.session.flush()


def _sync(session, key, value) -> None:
    if session.get(key) != value:
        session[key] = value


class SessionUserAuthentication(BaseAuthentication):
    """
    Resolves the server-side session to a User row on every request.

    - no user_id in session        -> anonymous (gates answer 401)
    - user_id but row gone         -> session destroyed, request flagged `session_invalidated`
    - ok                           -> role / company / must-change-password mirrored from the row
                                      into the session; returns (user, RequestContext)
    """

    def authenticate(self, request):
        from wst_core.iam.models import User

        django_request = request._request
        session = getattr(django_request, "session", None)
        if session is None:
            return None

        user_id = session.get(SESSION_USER_ID)
        if not user_id:
            return None

        user = User.objects.filter(id=user_id).first()
        if user is None:
            logger.info("stale session for missing user_id=%s; destroying", user_id)
            session.flush()
            django_request.session_invalidated = True
            return None

        _sync(session, SESSION_ROLE, user.role)
        _sync(session, SESSION_MAIN_COMPANY_ID, user.main_company_id)
        _sync(session, SESSION_PENDING_PASSWORD_CHANGE, bool(user.must_change_password))

        ctx = RequestContext(
            user=user,
            role=session[SESSION_ROLE],
            main_company_id=session[SESSION_MAIN_COMPANY_ID],
        )
        return (user, ctx)

    def authenticate_header(self, request):
        return 'Session realm="api"'
