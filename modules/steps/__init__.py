"""
Steps module.

Numbered preparation steps of a recipe.
"""

from .interfaces import IStepService
from .models import Step, StepCreate, StepUpdate
from .exceptions import StepNotFoundError

__all__ = [
    "IStepService",
    "Step",
    "StepCreate",
    "StepUpdate",
    "StepNotFoundError",
]
