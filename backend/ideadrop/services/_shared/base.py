from __future__ import annotations

from dataclasses import dataclass

from ideadrop.services._shared.errors import AuthenticationError, AuthorizationError
from ideadrop.services._shared.ids import UserId
from ideadrop.services._shared.policies.common import is_owner
from ideadrop.uow.sqlalchemy_uow import (
    SQLAlchemyReadOnlyUnitOfWork,
    SQLAlchemyUnitOfWork,
)


@dataclass(slots=True)
class ServiceContext:
    """Who is calling, and under which request id."""

    actor_id: UserId | None = None
    request_id: str | None = None


class BaseService:
    """
    Shared plumbing for application services.

    Services never touch ``db.session`` directly; every read goes through
    :meth:`ro_uow` and every write through :meth:`rw_uow`.
    """

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        self.ctx = ctx or ServiceContext()

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork()

    def ro_uow(self) -> SQLAlchemyReadOnlyUnitOfWork:
        return SQLAlchemyReadOnlyUnitOfWork()

    def require_actor(self) -> UserId:
        """
        Return the caller's id.

        :raises AuthenticationError: If the request carried no valid token.
        """
        if self.ctx.actor_id is None:
            raise AuthenticationError("Not authorized, no token")
        return self.ctx.actor_id

    def ensure_owner(self, actor_id: UserId | None, owner_id: int, *, msg: str | None = None) -> None:
        """
        :raises AuthorizationError: Unless ``actor_id`` owns the resource.
        """
        if not is_owner(actor_id=actor_id, owner_id=owner_id):
            raise AuthorizationError(msg or "Not authorized to modify this resource")
