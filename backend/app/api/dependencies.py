"""Route Dependencies: per-app objects injected into handlers."""

from fastapi import Request

from app.config import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with (create_app)."""
    return request.app.state.settings
