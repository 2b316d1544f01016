"""Custom Exception Hierarchy

Exception hierarchy for the résumé layout engine. Layout is deterministic, so
nothing here is retried: every error is raised once and surfaced to the caller.
"""


class ResumeLayoutError(Exception):
    """Base exception for all résumé layout errors.

    Catching this exception will catch all custom exceptions from the
    layout engine.
    """
    pass


# Validation Errors
class ValidationError(ResumeLayoutError):
    """Raised when input validation fails."""
    pass


class InvalidConfigurationError(ValidationError):
    """Raised when a template or style selection is not recognized."""

    def __init__(self, field: str, value, allowed: list):
        self.field = field
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"Unknown {field} {value!r}. Expected one of: {', '.join(self.allowed)}"
        )


class TemplateLockedError(ValidationError):
    """Raised when a premium template is requested without entitlement."""

    def __init__(self, template_name: str, product_id: str):
        self.template_name = template_name
        self.product_id = product_id
        super().__init__(
            f"Template '{template_name}' requires purchase of '{product_id}'"
        )


# PDF Rendering Errors
class RenderingError(ResumeLayoutError):
    """Base class for PDF rendering errors."""
    pass


class FontError(RenderingError):
    """Raised when font setup or registration fails."""
    pass


class MeasurementError(RenderingError):
    """Raised when the text backend cannot measure a string.

    Fatal to the render: no layout decision can be made without a measurement.
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        super().__init__(f"Failed to measure text '{text[:40]}': {reason}")


class SurfaceError(RenderingError):
    """Raised when the drawing surface cannot produce the document bytes."""
    pass


# Cancellation
class RenderCancelledError(ResumeLayoutError):
    """Raised when the caller abandons a render before it completes."""

    def __init__(self, page_index: int):
        self.page_index = page_index
        super().__init__(f"Render cancelled while laying out page {page_index + 1}")
