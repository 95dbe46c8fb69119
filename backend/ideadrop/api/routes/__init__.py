"""Route modules and the prefixes they are mounted at."""

from __future__ import annotations

from flask import Blueprint

from .auth import bp as auth_bp
from .health import bp as health_bp
from .ideas import bp as ideas_bp

# (blueprint, prefix below API_BASE_PREFIX)
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),
    (auth_bp, "/auth"),
    (ideas_bp, "/ideas"),
]
