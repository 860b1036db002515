"""
Custom exceptions for the explorer parser.

Error philosophy:
  - NotFound / MissingAttribute → FAIL HARD: the page layout diverged from the
    card schema we expect, so the whole record is abandoned.
  - UnexpectedFormat / OrdinalParseError → FAIL HARD: a value was located but
    could not be converted (number, date, boolean, ordinal).
  - UnsupportedSection → NOT AN ERROR: a recognised card we deliberately do not
    parse.  The classifier catches it and records the title as skipped.
  - TransientError → RETRYABLE: page acquisition failed before any parsing.

Parse errors and acquisition errors share a base class so a caller can catch
everything at once, but only TransientError sets ``retryable``.
"""

from typing import Optional


class ExplorerParserError(Exception):
    """Base exception for all explorer parser errors."""

    retryable = False

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_response(self) -> dict:
        """Convert to the JSON error payload printed by the CLI."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details
        }


# --- Layout divergence: an expected element or attribute is absent ---

class NotFound(ExplorerParserError):
    """Raised when a selector matched nothing under the queried node."""

    def __init__(self, selector: str, field: str, path: str):
        super().__init__(
            f"{field}: nothing matches '{selector}' under {path}",
            {"selector": selector, "field": field, "path": path}
        )
        self.selector = selector
        self.field = field
        self.path = path


class MissingAttribute(ExplorerParserError):
    """Raised when an element lacks a required attribute."""

    def __init__(self, attribute: str, field: str, path: str):
        super().__init__(
            f"{field}: attribute '{attribute}' missing on {path}",
            {"attribute": attribute, "field": field, "path": path}
        )
        self.attribute = attribute
        self.field = field
        self.path = path


# --- Conversion failures ---

class UnexpectedFormat(ExplorerParserError):
    """Raised when located text fails numeric/date/boolean conversion."""

    def __init__(self, field: str, value: str, expected: str):
        super().__init__(
            f"{field}: expected {expected}, got {value!r}",
            {"field": field, "value": value, "expected": expected}
        )
        self.field = field
        self.value = value
        self.expected = expected


class OrdinalParseError(UnexpectedFormat):
    """Raised when an 'Account #N' label has no integer after '#'."""

    def __init__(self, label: str):
        super().__init__("ordinal label", label, "a label ending in '#<integer>'")
        self.label = label


# --- Not an error: recorded by the classifier ---

class UnsupportedSection(ExplorerParserError):
    """Raised for cards that are recognised but intentionally not parsed."""

    def __init__(self, title: str):
        super().__init__(f"Section '{title}' is not supported", {"title": title})
        self.title = title


# --- Acquisition: orthogonal to parsing ---

class TransientError(ExplorerParserError):
    """Raised when the browser collaborator fails to navigate or render."""

    retryable = True

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to render {url}: {reason}", {"url": url, "reason": reason})
        self.url = url
        self.reason = reason


class ConfigError(ExplorerParserError):
    """Raised when configuration values are missing or invalid."""
    pass
