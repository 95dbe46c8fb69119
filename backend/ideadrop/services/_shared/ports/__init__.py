"""
ideadrop.services._shared.ports
===============================

*Ports* (hexagonal interfaces) for authentication infrastructure.

Modules
-------
- :mod:`token_provider`:
    Defines :class:`~.TokenProvider`, the abstraction for JWT creation and decoding,
    plus :class:`~.StubTokenProvider` for unit tests.

Concrete adapters live under ``ideadrop.infra``.
"""

from __future__ import annotations

from .token_provider import StubTokenProvider, TokenProvider

__all__ = ["TokenProvider", "StubTokenProvider"]
