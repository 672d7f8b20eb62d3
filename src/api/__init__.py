"""Inbound HTTP layer.

Why a separate package:
- Keeps FastAPI routing and request binding out of the core services.
"""

from api.app import create_app

__all__ = ["create_app"]
