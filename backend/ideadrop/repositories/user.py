"""User repository: lookup by email and credential checks."""

from __future__ import annotations

from sqlalchemy import exists, select

from ideadrop.models.user import User, normalize_email
from ideadrop.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Persistence for :class:`User`.

    Accounts are immutable once created, so no field is editable. Tokens and
    cookies are handled elsewhere.
    """

    model = User

    def get_by_email(self, email: str) -> User | None:
        """Fetch a user by email, ignoring case and surrounding blanks."""
        stmt = select(User).where(User.email == normalize_email(email))
        return self.session.scalars(stmt).first()

    def exists_by_email(self, email: str) -> bool:
        stmt = select(exists().where(User.email == normalize_email(email)))
        return bool(self.session.scalar(stmt))

    def authenticate(self, email: str, password: str) -> User | None:
        """Return the user when ``password`` matches, else ``None``.

        Unknown emails and wrong passwords are indistinguishable to callers.
        """
        user = self.get_by_email(email)
        if user is None or not user.verify_password(password):
            return None
        return user
