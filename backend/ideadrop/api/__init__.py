"""HTTP layer: blueprints mounted under ``API_BASE_PREFIX``."""

from __future__ import annotations

from flask import Flask


def _join(base: str, rel: str) -> str:
    """``_join("/api/", "/ideas")`` gives ``"/api/ideas"``; an empty ``rel`` gives the base."""
    parts = [p for p in (base.strip("/"), rel.strip("/")) if p]
    return "/" + "/".join(parts)


def init_app(app: Flask) -> None:
    """Mount every blueprint listed in :data:`ideadrop.api.routes.REGISTRY`."""
    from ideadrop.api.routes import REGISTRY

    base = app.config.get("API_BASE_PREFIX", "/api")
    for blueprint, rel_prefix in REGISTRY:
        app.register_blueprint(blueprint, url_prefix=_join(base, rel_prefix))


__all__ = ["init_app"]
