"""
Steps module exceptions.
"""

from shared.exceptions import NotFoundError


class StepNotFoundError(NotFoundError):
    """Raised when a step doesn't exist or its recipe is not visible."""

    def __init__(self, step_id: int):
        super().__init__(
            f"Step not found: {step_id}",
            code="STEP_NOT_FOUND",
            details={"step_id": step_id},
        )
        self.step_id = step_id
