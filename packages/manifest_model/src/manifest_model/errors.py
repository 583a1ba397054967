from __future__ import annotations

from typing import Any


class ManifestError(RuntimeError):
    """Base error for every failure that aborts a pyinit run."""

    default_code = "manifest_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code or self.default_code
        self.details = details or {}


class MissingRequiredFieldError(ManifestError):
    default_code = "missing_required_field"


class InvalidProjectRootError(MissingRequiredFieldError):
    default_code = "invalid_project_root"


class LicenseNotFoundError(ManifestError):
    default_code = "license_not_found"


class NetworkFailureError(ManifestError):
    default_code = "network_failure"


class SerializationFailureError(ManifestError):
    default_code = "serialization_failure"


class IoFailureError(ManifestError):
    default_code = "io_failure"
