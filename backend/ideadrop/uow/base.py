"""Transaction boundary used by every service call."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from ideadrop.repositories import IdeaRepository, UserRepository


class UnitOfWork(ABC):
    """One use case's access to the user and idea stores.

    ``users`` and ``ideas`` share a single transaction. Leaving the ``with``
    block normally commits it; leaving it through an exception discards it and
    lets the exception propagate.
    """

    users: UserRepository
    ideas: IdeaRepository

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.rollback()
            return
        try:
            self.commit()
        except Exception:
            self.rollback()
            raise

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...
