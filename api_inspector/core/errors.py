"""
Inspector exceptions. Routes map these to HTTP responses.
"""

from __future__ import annotations


class InspectorError(Exception):
    pass


class InvalidServiceUrlError(InspectorError, ValueError):
    """The target URL is missing or not an absolute http(s) URL."""


class ServiceUnreachableError(InspectorError):
    """The target host cannot be resolved at all."""


class AnalysisError(InspectorError):
    """An analysis run failed; no partial report is produced."""

    PREFIX = "Failed to analyze API"

    def __init__(self, cause: str) -> None:
        super().__init__(f"{self.PREFIX}: {cause}")


class OpenApiError(InspectorError):
    """No OpenAPI document could be fetched or generated."""
