"""User aggregate — a registered shop customer or administrator."""

from __future__ import annotations

import re
from dataclasses import dataclass

from flowershop.domain.exceptions import ValidationError
from flowershop.domain.model.value_objects import PHONE_PATTERN

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


@dataclass
class User:
    """A shop account.

    Passwords are kept in plain text: credential security is outside
    what this store models.
    """

    login: str
    password: str
    name: str
    phone: str
    email: str
    is_admin: bool = False

    @staticmethod
    def register(
        login: str,
        password: str,
        name: str,
        phone: str,
        email: str,
    ) -> User:
        """Create a new customer account, enforcing the sign-up rules."""
        problems: list[str] = []

        if not login or not login.strip():
            problems.append("login is required")
        if len(password or "") < MIN_PASSWORD_LENGTH:
            problems.append(
                f"password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if not name or not name.strip():
            problems.append("name is required")
        if not phone or not phone.strip():
            problems.append("phone is required")
        elif not PHONE_PATTERN.match(phone):
            problems.append("phone must look like +7(XXX)-XXX-XX-XX")
        if not email or not email.strip():
            problems.append("email is required")
        elif not EMAIL_PATTERN.match(email):
            problems.append("email is malformed")

        if problems:
            raise ValidationError("Invalid registration: " + "; ".join(problems))

        return User(
            login=login.strip(),
            password=password,
            name=name.strip(),
            phone=phone,
            email=email.strip(),
            is_admin=False,
        )

    def check_password(self, password: str) -> bool:
        return self.password == password
