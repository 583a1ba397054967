from __future__ import annotations

from dataclasses import dataclass, field

from manifest_model.contributor import Contributor

MANIFEST_FILENAME = "pyproject.toml"

DEFAULT_BUILD_REQUIRES: tuple[str, ...] = ("setuptools", "wheel")
DEFAULT_BUILD_BACKEND = "setuptools.build_meta"
DEFAULT_VERSION = "0.1.0"

# Fields flagged `omit_empty` are dropped from the serialized document when they hold
# the empty value of their type. Required keys never carry the flag.
_OMIT_EMPTY = {"omit_empty": True}


@dataclass
class BuildSystem:
    requires: list[str] = field(default_factory=lambda: list(DEFAULT_BUILD_REQUIRES))
    build_backend: str = DEFAULT_BUILD_BACKEND


@dataclass
class Project:
    name: str = ""
    version: str = ""

    description: str = field(default="", metadata=_OMIT_EMPTY)
    readme: str = field(default="", metadata=_OMIT_EMPTY)
    requires_python: str = field(default="", metadata=_OMIT_EMPTY)
    license: str = field(default="", metadata=_OMIT_EMPTY)
    authors: list[Contributor] = field(default_factory=list, metadata=_OMIT_EMPTY)
    maintainers: list[Contributor] = field(default_factory=list, metadata=_OMIT_EMPTY)
    keywords: list[str] = field(default_factory=list, metadata=_OMIT_EMPTY)
    classifiers: list[str] = field(default_factory=list, metadata=_OMIT_EMPTY)


@dataclass
class Manifest:
    build_system: BuildSystem = field(default_factory=BuildSystem)
    project: Project = field(default_factory=Project)
