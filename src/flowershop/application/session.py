"""Identity/Session Holder.

Tracks at most one logged-in user at a time.  Application handlers ask
it for the current user and it raises when nobody (or the wrong kind of
user) is logged in.
"""

from __future__ import annotations

import logging

from flowershop.domain.exceptions import (
    AuthenticationFailed,
    NotAuthenticated,
    NotPermitted,
    ValidationError,
)
from flowershop.domain.model.user import User
from flowershop.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class Session:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo
        self._current: User | None = None

    @property
    def current_user(self) -> User | None:
        return self._current

    @property
    def user_id(self) -> str | None:
        return self._current.login if self._current else None

    def login(self, login: str, password: str) -> User:
        user = self._user_repo.get_by_login(login)
        if user is None:
            raise AuthenticationFailed("Unknown login")
        if not user.check_password(password):
            raise AuthenticationFailed("Wrong password")
        self._current = user
        logger.info("User %s logged in", user.login)
        return user

    def register(
        self,
        login: str,
        password: str,
        name: str,
        phone: str,
        email: str,
    ) -> User:
        """Create a customer account and log it in."""
        user = User.register(login, password, name, phone, email)
        if self._user_repo.get_by_login(user.login) is not None:
            raise ValidationError(f"Login '{user.login}' is already taken")
        if self._user_repo.get_by_email(user.email) is not None:
            raise ValidationError(f"Email '{user.email}' is already registered")

        self._user_repo.save(user)
        self._current = user
        logger.info("Registered user %s", user.login)
        return user

    def logout(self) -> None:
        if self._current is not None:
            logger.info("User %s logged out", self._current.login)
        self._current = None

    def require_user(self) -> User:
        if self._current is None:
            raise NotAuthenticated()
        return self._current

    def require_admin(self) -> User:
        user = self.require_user()
        if not user.is_admin:
            raise NotPermitted("Administrator rights required")
        return user
