"""
Session snapshot consumed by the access guard, and the provider that
builds it from Flask-Login.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SessionStatus(str, Enum):
    UNAUTHENTICATED = 'unauthenticated'
    LOADING = 'loading'
    AUTHENTICATED = 'authenticated'


@dataclass(frozen=True)
class SessionUser:
    id: str
    name: str = ''
    email: str = ''
    role: str = 'user'


@dataclass(frozen=True)
class Session:
    status: SessionStatus
    user: Optional[SessionUser] = None

    @classmethod
    def unauthenticated(cls):
        return cls(SessionStatus.UNAUTHENTICATED)

    @classmethod
    def loading(cls):
        return cls(SessionStatus.LOADING)

    @classmethod
    def authenticated(cls, user):
        return cls(SessionStatus.AUTHENTICATED, user)


class FlaskLoginSessionProvider:
    """Reads the current Flask-Login user once per call.

    Must be used inside a request context.
    """

    def current(self):
        from flask_login import current_user

        if not current_user or not current_user.is_authenticated:
            return Session.unauthenticated()
        return Session.authenticated(SessionUser(
            id=str(current_user.get_id()),
            name=getattr(current_user, 'name', '') or '',
            email=getattr(current_user, 'email', '') or '',
            role=getattr(current_user, 'role', 'user') or 'user',
        ))

    def sign_out(self):
        from flask_login import logout_user

        logout_user()
