"""Factory Boy definition for :class:`ideadrop.models.user.User`."""

from __future__ import annotations

import factory
from ideadrop.models.user import User
from tests.factories import BaseFactory

DEFAULT_PASSWORD = "Passw0rd!"


class UserFactory(BaseFactory):
    """
    Build persisted :class:`ideadrop.models.user.User` instances.

    Notes
    -----
    ``password`` goes through the model's write-only setter, so the stored
    value is always a hash.
    """

    class Meta:
        model = User

    id = None  # let autoincrement handle it
    name = factory.Faker("name")
    email = factory.Sequence(lambda n: f"user{n}@example.com")
    password = DEFAULT_PASSWORD
