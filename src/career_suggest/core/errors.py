"""Custom exceptions for career-suggest.

HTTP-facing errors carry a ``status_code``; the API layer renders them as
``{"error": message}`` without exposing internal detail.
"""

from __future__ import annotations


class CareerSuggestError(Exception):
    """Base exception for all career-suggest errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInputError(CareerSuggestError):
    """Raised when a request body is malformed or incomplete.

    User-correctable; surfaces as HTTP 400.
    """

    status_code = 400


class ConfigurationError(CareerSuggestError):
    """Raised when the criteria table or a criterion definition is invalid.

    Operator-correctable; surfaces as HTTP 500. Should never occur with a
    correctly populated table.
    """

    status_code = 500


class UnknownTypeError(ConfigurationError):
    """Raised when an MBTI type has no criteria mapping."""

    def __init__(self, mbti_type: str) -> None:
        self.mbti_type = mbti_type
        super().__init__(f"未找到 MBTI 类型 {mbti_type} 对应的匹配规则")


class CatalogLoadError(CareerSuggestError):
    """Raised when the career catalog cannot be read, parsed or validated.

    This is a fatal startup error - the service must not accept requests.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"无法加载职业目录 {path}: {reason}")
