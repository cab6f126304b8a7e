"""Errors raised by the report pipelines."""


class GenerationUnavailable(RuntimeError):
    """The generation service returned nothing usable for *stage*."""

    def __init__(self, message: str, stage: str = ""):
        super().__init__(message)
        self.stage = stage
