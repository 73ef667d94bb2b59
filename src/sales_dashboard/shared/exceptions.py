"""
Custom exceptions for the sales dashboard data core.

This module contains the exception classes raised when configuration is
invalid, when a derived KPI would be degenerate, or when a selector or
dataset falls outside its fixed shape.
"""

from typing import Any


class SalesDashboardException(Exception):
    """Base exception for all sales dashboard errors."""

    pass


class ConfigurationError(SalesDashboardException):
    """Exception raised when configuration or derived results are unusable."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        original_error: Exception | None = None,
    ):
        self.setting = setting
        self.original_error = original_error

        if setting:
            message = f"Invalid setting '{setting}': {message}"

        if original_error:
            message = f"{message} (Original error: {original_error})"

        super().__init__(message)


class KPIComputationError(ConfigurationError):
    """Exception raised when a KPI rollup would be zero-divided or non-finite."""

    def __init__(
        self,
        message: str,
        metric: str | None = None,
        values: dict[str, Any] | None = None,
    ):
        self.metric = metric
        self.values = values or {}

        error_parts = [message]

        if metric:
            error_parts.append(f"Metric: {metric}")

        if values:
            error_parts.append(
                "Values: " + ", ".join(f"{key}={value}" for key, value in values.items())
            )

        super().__init__(" | ".join(error_parts))


class InvalidSelectorError(SalesDashboardException):
    """Exception raised when a selector value is outside its enumeration."""

    def __init__(self, selector: str, value: Any, allowed: list[str] | tuple[str, ...]):
        self.selector = selector
        self.value = value
        self.allowed = list(allowed)

        message = (
            f"Unknown {selector} selector {value!r}. "
            f"Expected one of: {', '.join(self.allowed)}"
        )

        super().__init__(message)


class DatasetShapeError(SalesDashboardException):
    """Exception raised when a dataset violates the fixed collection shape."""

    def __init__(
        self,
        message: str,
        collection: str | None = None,
        validation_errors: list[str] | None = None,
    ):
        self.collection = collection
        self.validation_errors = validation_errors or []

        error_parts = [message]

        if collection:
            error_parts.append(f"Collection: {collection}")

        if validation_errors:
            error_parts.extend(
                [f"Validation error: {error}" for error in validation_errors]
            )

        super().__init__(" | ".join(error_parts))
