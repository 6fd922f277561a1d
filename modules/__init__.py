"""
Feature modules for CookShare backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- repository.py: SQL access through the shared engine
- service.py: Business logic implementation
- routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
Recipe visibility and write permission live in recipes.policy; steps and
ratings defer to the recipe service for both.
"""
