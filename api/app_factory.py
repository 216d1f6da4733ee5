"""Entry point exposing a ready-made app for uvicorn/gunicorn."""
from api.app import create_app

app = create_app()

__all__ = ["app", "create_app"]
