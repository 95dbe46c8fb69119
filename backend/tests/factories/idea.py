"""Factory Boy definition for :class:`ideadrop.models.idea.Idea`."""

from __future__ import annotations

import factory
from ideadrop.models.idea import Idea
from tests.factories import BaseFactory
from tests.factories.user import UserFactory


class IdeaFactory(BaseFactory):
    """Build persisted :class:`ideadrop.models.idea.Idea` instances."""

    class Meta:
        model = Idea

    id = None
    owner = factory.SubFactory(UserFactory)
    title = factory.Sequence(lambda n: f"Idea {n}")
    summary = factory.Faker("sentence")
    description = factory.Faker("paragraph")
    tags = factory.LazyFunction(lambda: ["general"])
