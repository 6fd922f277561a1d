"""
CookShare API package.

Provides the FastAPI application for the CookShare recipe service. The
application object lives in api.app (``uvicorn api.app:app``).
"""
