"""Process-memory implementation of UserRepository."""

from __future__ import annotations

from flowershop.domain.model.user import User
from flowershop.domain.repository.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):

    def __init__(self, users: list[User] | None = None) -> None:
        self._store: dict[str, User] = {}
        for user in users or []:
            self._store[user.login] = user

    def get_by_login(self, login: str) -> User | None:
        return self._store.get(login)

    def get_by_email(self, email: str) -> User | None:
        for user in self._store.values():
            if user.email.lower() == email.lower():
                return user
        return None

    def save(self, user: User) -> None:
        self._store[user.login] = user
