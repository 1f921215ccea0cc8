"""
ClipDeck FastAPI Application.

This module contains the REST API for ClipDeck:

- main: FastAPI application entry point and configuration
- routes/: API endpoint definitions (health, search)
- models: Pydantic response models and error messages
- dependencies: FastAPI dependency injection providers

API Structure:
- /health - Health check
- /api/tiktok/search - TikTok keyword search proxy

Example:
    from clipdeck.api.main import app

    # Run with: uvicorn clipdeck.api.main:app --reload
"""

from clipdeck.api.main import app, create_app

__all__ = ["app", "create_app"]
