from manifest_model.contributor import (
    ComplexContributor,
    Contributor,
    FlatContributor,
    parse_contributor,
)
from manifest_model.errors import (
    InvalidProjectRootError,
    IoFailureError,
    LicenseNotFoundError,
    ManifestError,
    MissingRequiredFieldError,
    NetworkFailureError,
    SerializationFailureError,
)
from manifest_model.model import (
    DEFAULT_BUILD_BACKEND,
    DEFAULT_BUILD_REQUIRES,
    DEFAULT_VERSION,
    MANIFEST_FILENAME,
    BuildSystem,
    Manifest,
    Project,
)
from manifest_model.toml_writer import manifest_to_document, render_manifest, write_manifest

__all__ = [
    "DEFAULT_BUILD_BACKEND",
    "DEFAULT_BUILD_REQUIRES",
    "DEFAULT_VERSION",
    "MANIFEST_FILENAME",
    "BuildSystem",
    "ComplexContributor",
    "Contributor",
    "FlatContributor",
    "InvalidProjectRootError",
    "IoFailureError",
    "LicenseNotFoundError",
    "Manifest",
    "ManifestError",
    "MissingRequiredFieldError",
    "NetworkFailureError",
    "Project",
    "SerializationFailureError",
    "manifest_to_document",
    "parse_contributor",
    "render_manifest",
    "write_manifest",
]
