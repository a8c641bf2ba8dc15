"""
Centralized error handling for mathcanvas.

Provides a hierarchy of custom exceptions with user-friendly messages,
suggestions for fixes, and a severity that tells callers whether the
failure came from the input or from the layout engine itself.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, List


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    INFO = auto()  # Informational, output may still be usable
    WARNING = auto()  # Non-fatal, rendered with degraded fidelity
    ERROR = auto()  # Input cannot be rendered, fix the markup and retry
    CRITICAL = auto()  # Layout defect, not recoverable by the caller


@dataclass
class ErrorContext:
    """
    Rich context for error reporting.

    Provides user-friendly information beyond the raw exception.
    """

    title: str  # Short title for the report line
    message: str  # User-friendly message
    technical_details: Optional[str]  # Debug info
    suggestions: List[str]  # Actionable suggestions
    severity: ErrorSeverity
    recoverable: bool = True  # Can user retry with different input?

    @classmethod
    def from_exception(cls, exc: Exception, context: str = "") -> "ErrorContext":
        """Create ErrorContext from any exception using smart detection."""
        exc_type = type(exc).__name__
        exc_msg = str(exc)

        if isinstance(exc, RenderError):
            return exc.to_context()

        # Import/dependency errors
        if isinstance(exc, ImportError):
            return cls(
                title="Missing Dependency",
                message="A required component is not installed.",
                technical_details=f"{exc_type}: {exc_msg}",
                suggestions=[
                    "Check that all dependencies are installed",
                    "Run: pip install -e .[test]",
                ],
                severity=ErrorSeverity.CRITICAL,
                recoverable=False,
            )

        # Generic fallback
        return cls(
            title="Error",
            message=f"An unexpected error occurred: {exc_msg}",
            technical_details=f"{exc_type}: {exc_msg}\nContext: {context}",
            suggestions=["Try a simpler expression"],
            severity=ErrorSeverity.ERROR,
        )


class RenderError(Exception):
    """
    Base exception for all mathcanvas errors.

    Subclasses provide rich error context for user-friendly reporting.
    """

    default_title = "Render Error"
    default_suggestions: List[str] = []
    default_severity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str,
        *,
        suggestions: Optional[List[str]] = None,
        technical_details: Optional[str] = None,
        severity: Optional[ErrorSeverity] = None,
    ):
        super().__init__(message)
        self.user_message = message
        self.suggestions = suggestions or self.default_suggestions.copy()
        self.technical_details = technical_details
        self.severity = severity or self.default_severity

    def to_context(self) -> ErrorContext:
        """Convert to ErrorContext for display."""
        return ErrorContext(
            title=self.default_title,
            message=self.user_message,
            technical_details=self.technical_details,
            suggestions=self.suggestions,
            severity=self.severity,
            recoverable=self.severity != ErrorSeverity.CRITICAL,
        )


# === Translation Errors ===


class UnsupportedConstructError(RenderError):
    """Raised when an expression uses an operator with no text layout."""

    default_title = "Unsupported Construct"
    default_suggestions = [
        "Accents and font commands have no plain-text layout",
        "Remove the command or replace it with plain symbols",
    ]

    def __init__(self, construct: str, *, suggestions: Optional[List[str]] = None):
        super().__init__(
            f"Cannot lay out '{construct}' as text",
            suggestions=suggestions,
            technical_details=f"Construct: {construct}",
        )
        self.construct = construct


class MalformedMatrixError(RenderError):
    """Raised when matrix cells do not fill a whole number of rows."""

    default_title = "Malformed Matrix"
    default_suggestions = [
        "Give every matrix row the same number of comma-separated cells",
    ]

    def __init__(self, cell_count: int, num_cols: int):
        if num_cols <= 0:
            msg = f"Matrix needs at least one column, got {num_cols}"
        else:
            msg = f"{cell_count} cells do not fill rows of {num_cols} columns"

        super().__init__(
            msg,
            technical_details=f"cells={cell_count}, num_cols={num_cols}",
        )
        self.cell_count = cell_count
        self.num_cols = num_cols


# === Layout Errors ===


class LayoutError(RenderError):
    """Raised when a layout node paints outside its own canvas."""

    default_title = "Layout Error"
    default_severity = ErrorSeverity.CRITICAL
    default_suggestions = [
        "This is a bug in the layout engine, please report the expression",
    ]


class CanvasBoundsError(LayoutError, IndexError):
    """Raised on a canvas access or blit outside the grid."""

    default_title = "Canvas Bounds"

    def __init__(self, x: int, y: int, width: int, height: int, *, extent=None):
        if extent is None:
            msg = f"Cell ({x}, {y}) is outside a {width}x{height} canvas"
        else:
            w, h = extent
            msg = (
                f"A {w}x{h} block at ({x}, {y}) does not fit "
                f"a {width}x{height} canvas"
            )
        super().__init__(msg)
        self.x = x
        self.y = y


class InvalidSizeError(LayoutError, ValueError):
    """Raised when a canvas is created with a negative dimension."""

    default_title = "Invalid Size"

    def __init__(self, width: int, height: int):
        super().__init__(f"Canvas size {width}x{height} is negative")


# === Utility functions ===


def format_error_for_user(exc: Exception, context: str = "") -> str:
    """
    Format an exception into a user-friendly string.

    Returns a single string suitable for a terminal error line.
    """
    ctx = ErrorContext.from_exception(exc, context)

    result = ctx.message
    if ctx.suggestions:
        result += f" Try: {ctx.suggestions[0]}"

    return result
