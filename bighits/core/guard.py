"""
Access Guard

Decides, for a session snapshot, whether a protected admin view may render.
"""

import logging
from dataclasses import dataclass
from typing import Union

from bighits.core.session import SessionStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Allow:
    """Render the view; `loading` asks for a placeholder while the session resolves."""
    loading: bool = False


@dataclass(frozen=True)
class RedirectTo:
    path: str


Action = Union[Allow, RedirectTo]


class AccessGuard:
    """Admin gate evaluated on every protected view.

    Rules, first match wins:

    1. session still loading -> ``Allow(loading=True)``
    2. not signed in -> redirect to the sign-in page
    3. signed in without the admin role -> redirect home
    4. signed-in admin -> ``Allow()``

    A malformed session (for example authenticated with no user attached)
    is treated as a non-admin; ``evaluate`` never raises.
    """

    def __init__(self, signin_path='/auth/signin', home_path='/', required_role='admin'):
        self.signin_path = signin_path
        self.home_path = home_path
        self.required_role = required_role

    def evaluate(self, session) -> Action:
        status = getattr(session, 'status', None)

        if status == SessionStatus.LOADING:
            return Allow(loading=True)

        if status != SessionStatus.AUTHENTICATED:
            logger.debug('Guard: no authenticated session, redirecting to %s', self.signin_path)
            return RedirectTo(self.signin_path)

        role = getattr(getattr(session, 'user', None), 'role', None)
        if role != self.required_role:
            logger.debug('Guard: role %r is not %r, redirecting to %s',
                         role, self.required_role, self.home_path)
            return RedirectTo(self.home_path)

        return Allow()
