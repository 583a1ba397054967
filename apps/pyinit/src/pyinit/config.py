from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from license_catalog import DEFAULT_API_URL, DEFAULT_TIMEOUT_SECONDS
from manifest_model import ManifestError

from pyinit.collect import CollectDefaults

CONFIG_ENV = "PYINIT_CONFIG"
LICENSE_API_URL_ENV = "PYINIT_LICENSE_API_URL"
_CONFIG_VERSION = 1


class ConfigError(ManifestError):
    default_code = "config_error"


@dataclass(frozen=True)
class PyinitConfig:
    source_path: Path | None = None
    defaults: CollectDefaults = field(default_factory=CollectDefaults)
    license_api_url: str = DEFAULT_API_URL
    license_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    offline: bool = False


def default_config_path() -> Path:
    return Path.home() / ".config" / "pyinit" / "config.yaml"


def resolve_config_path(arg: Path | None, *, environ: Mapping[str, str] | None = None) -> Path | None:
    """Pick the config file: explicit argument, then `$PYINIT_CONFIG`, then the user default.

    The user default is only returned when it exists; explicit paths are returned
    as-is so a typo surfaces as an error instead of being ignored.
    """

    env = os.environ if environ is None else environ
    if arg is not None:
        return arg
    raw = env.get(CONFIG_ENV)
    if raw is not None and raw.strip():
        return Path(raw.strip())
    candidate = default_config_path()
    return candidate if candidate.is_file() else None


def _load_yaml_mapping(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML in {path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(raw).__name__}.")
    return raw


def _ensure_no_unknown_keys(*, data: dict[str, Any], allowed: set[str], path: Path, where: str) -> None:
    unknown = set(data) - allowed
    if not unknown:
        return
    unknown_list = ", ".join(sorted(str(k) for k in unknown))
    allowed_list = ", ".join(sorted(allowed))
    raise ConfigError(f"Unknown keys in {path} ({where}): {unknown_list}. Allowed: {allowed_list}.")


def _section(data: dict[str, Any], key: str, *, path: Path) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"Expected mapping for {key} in {path}.")
    return value


def _parse_str(value: Any, *, path: Path, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"Expected non-empty string for {field_name} in {path}.")
    return value.strip()


def _parse_str_list(value: Any, *, path: Path, field_name: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not value:
        raise ConfigError(f"Expected non-empty list for {field_name} in {path}.")
    return tuple(
        _parse_str(item, path=path, field_name=f"{field_name}[{idx}]") for idx, item in enumerate(value)
    )


def _parse_version(value: Any, *, path: Path) -> str:
    # YAML reads `version: 1.0` as a float.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    return _parse_str(value, path=path, field_name="defaults.version")


def load_config(path: Path | None, *, environ: Mapping[str, str] | None = None) -> PyinitConfig:
    env = os.environ if environ is None else environ
    api_url_override = env.get(LICENSE_API_URL_ENV, "").strip() or None

    if path is None:
        return PyinitConfig(license_api_url=api_url_override or DEFAULT_API_URL)

    data = _load_yaml_mapping(path)
    _ensure_no_unknown_keys(data=data, allowed={"version", "defaults", "license"}, path=path, where="root")

    version = data.get("version", _CONFIG_VERSION)
    if not isinstance(version, int) or isinstance(version, bool):
        raise ConfigError(f"Expected integer version in {path}.")
    if version > _CONFIG_VERSION:
        raise ConfigError(
            f"{path}: version {version} is newer than this pyinit supports ({_CONFIG_VERSION})"
        )

    defaults_raw = _section(data, "defaults", path=path)
    _ensure_no_unknown_keys(
        data=defaults_raw,
        allowed={"build_requires", "build_backend", "version"},
        path=path,
        where="defaults",
    )
    base = CollectDefaults()
    defaults = CollectDefaults(
        build_requires=(
            _parse_str_list(defaults_raw["build_requires"], path=path, field_name="defaults.build_requires")
            if "build_requires" in defaults_raw
            else base.build_requires
        ),
        build_backend=(
            _parse_str(defaults_raw["build_backend"], path=path, field_name="defaults.build_backend")
            if "build_backend" in defaults_raw
            else base.build_backend
        ),
        version=(
            _parse_version(defaults_raw["version"], path=path)
            if "version" in defaults_raw
            else base.version
        ),
    )

    license_raw = _section(data, "license", path=path)
    _ensure_no_unknown_keys(
        data=license_raw,
        allowed={"api_url", "timeout_seconds", "offline"},
        path=path,
        where="license",
    )
    api_url = DEFAULT_API_URL
    if "api_url" in license_raw:
        api_url = _parse_str(license_raw["api_url"], path=path, field_name="license.api_url")

    timeout = license_raw.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(f"Expected positive number for license.timeout_seconds in {path}.")

    offline = license_raw.get("offline", False)
    if not isinstance(offline, bool):
        raise ConfigError(f"Expected boolean for license.offline in {path}.")

    return PyinitConfig(
        source_path=path,
        defaults=defaults,
        license_api_url=api_url_override or api_url,
        license_timeout_seconds=float(timeout),
        offline=offline,
    )
