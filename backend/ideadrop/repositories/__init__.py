"""Persistence access for users and ideas."""

from __future__ import annotations

from ideadrop.repositories.base import BaseRepository
from ideadrop.repositories.idea import IdeaRepository
from ideadrop.repositories.user import UserRepository

__all__ = ["BaseRepository", "IdeaRepository", "UserRepository"]
