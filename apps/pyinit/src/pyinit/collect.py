from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from license_catalog import select_license
from manifest_model import (
    DEFAULT_BUILD_BACKEND,
    DEFAULT_BUILD_REQUIRES,
    DEFAULT_VERSION,
    InvalidProjectRootError,
    Manifest,
    MissingRequiredFieldError,
    parse_contributor,
)

from pyinit.prompts import Prompter

T = TypeVar("T")

CONTRIBUTOR_EXAMPLE = '"Antoine Langlois";name="Antoine L",email="email@domain.net"'


@dataclass(frozen=True)
class CollectDefaults:
    build_requires: tuple[str, ...] = DEFAULT_BUILD_REQUIRES
    build_backend: str = DEFAULT_BUILD_BACKEND
    version: str = DEFAULT_VERSION


def split_list(raw: str, delimiter: str, transform: Callable[[str], T]) -> list[T]:
    """Split `raw` on `delimiter`, drop empty pieces and map the rest in order.

    Pieces are not trimmed: `" a"` stays `" a"`, only `""` is discarded.
    """
    return [transform(piece) for piece in raw.split(delimiter) if piece]


def default_project_name(project_root: Path | None) -> str | None:
    if project_root is None:
        return None
    name = project_root.name
    if name in {"", ".", ".."}:
        return None
    return name


def _ask_required(
    prompter: Prompter,
    prompt: str,
    default: str | None,
    *,
    error: type[MissingRequiredFieldError] = MissingRequiredFieldError,
    message: str,
) -> str:
    if default:
        return prompter.ask_text(prompt, default=default)
    # No default: a single empty answer aborts the run instead of re-prompting.
    value = prompter.ask_text(prompt, allow_empty=True)
    if not value:
        raise error(message, details={"prompt": prompt})
    return value


def _ask_list(prompter: Prompter, prompt: str, transform: Callable[[str], T]) -> list[T]:
    return split_list(prompter.ask_text(prompt, allow_empty=True), ";", transform)


def collect_manifest(
    prompter: Prompter,
    *,
    complete: bool = False,
    project_root: Path | None = None,
    defaults: CollectDefaults | None = None,
    license_source: Callable[[], Sequence[str]] | None = None,
) -> Manifest:
    """Ask every manifest field in order and return the populated manifest.

    Minimal mode stops after the project version. Complete mode goes on with the
    optional project fields; the license comes from `license_source` through the
    license selector when a source is given, otherwise it is free text.
    """

    defaults = defaults or CollectDefaults()
    manifest = Manifest()
    build_system = manifest.build_system
    project = manifest.project

    build_system.requires = split_list(
        prompter.ask_text(
            "build dependencies (comma separated)",
            default=",".join(defaults.build_requires) or None,
            allow_empty=True,
        ),
        ",",
        str,
    )
    build_system.build_backend = _ask_required(
        prompter,
        "build back-end",
        defaults.build_backend,
        message="A build back-end is required.",
    )

    project.name = _ask_required(
        prompter,
        "project name",
        default_project_name(project_root),
        error=InvalidProjectRootError,
        message=(
            f"Invalid project root {str(project_root)!r}: no project name can be derived from it "
            "and none was given."
        ),
    )
    project.version = _ask_required(
        prompter,
        "version",
        defaults.version,
        message="A project version is required.",
    )

    if not complete:
        return manifest

    project.description = prompter.ask_text("description", allow_empty=True)
    project.readme = prompter.ask_text("readme", allow_empty=True)
    project.requires_python = prompter.ask_text("minimum python version", allow_empty=True)
    if license_source is None:
        project.license = prompter.ask_text("license", allow_empty=True)
    else:
        project.license = select_license(sorted(license_source()), prompter)
    project.authors = _ask_list(prompter, f"authors (e.g: {CONTRIBUTOR_EXAMPLE})", parse_contributor)
    project.maintainers = _ask_list(
        prompter, f"maintainers (e.g: {CONTRIBUTOR_EXAMPLE})", parse_contributor
    )
    project.keywords = _ask_list(prompter, "keywords (e.g: KEYW1;KEYW2)", str)
    project.classifiers = _ask_list(prompter, "classifiers (e.g: CLASS1;CLASS2)", str)
    return manifest
