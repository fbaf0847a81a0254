"""Abstract repository for User aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from flowershop.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_login(self, login: str) -> User | None:
        """Return a user by login, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by email, or None if not found."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""
