from __future__ import annotations

from pathlib import Path

import pytest

from license_catalog import DEFAULT_API_URL
from pyinit.collect import CollectDefaults
from pyinit.config import ConfigError, load_config, resolve_config_path


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_no_config_uses_builtin_defaults() -> None:
    config = load_config(None, environ={})
    assert config.source_path is None
    assert config.defaults == CollectDefaults()
    assert config.license_api_url == DEFAULT_API_URL
    assert config.offline is False


def test_config_file_overrides_defaults(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "config.yaml",
        "\n".join(
            [
                "version: 1",
                "defaults:",
                "  build_requires: [hatchling]",
                "  build_backend: hatchling.build",
                "  version: 1.0",
                "license:",
                "  api_url: https://licenses.internal",
                "  timeout_seconds: 2",
                "  offline: true",
                "",
            ]
        ),
    )

    config = load_config(path, environ={})

    assert config.source_path == path
    assert config.defaults == CollectDefaults(
        build_requires=("hatchling",), build_backend="hatchling.build", version="1.0"
    )
    assert config.license_api_url == "https://licenses.internal"
    assert config.license_timeout_seconds == 2.0
    assert config.offline is True


def test_empty_config_file_is_accepted(tmp_path: Path) -> None:
    config = load_config(_write(tmp_path / "config.yaml", ""), environ={})
    assert config.defaults == CollectDefaults()


def test_env_overrides_license_api_url(tmp_path: Path) -> None:
    path = _write(tmp_path / "config.yaml", "license:\n  api_url: https://from-file\n")
    config = load_config(path, environ={"PYINIT_LICENSE_API_URL": "https://from-env"})
    assert config.license_api_url == "https://from-env"


@pytest.mark.parametrize(
    ("text", "match"),
    [
        ("- not\n- a mapping\n", "Expected a YAML mapping"),
        ("defaults: [\n", "Failed to parse YAML"),
        ("colour: blue\n", "Unknown keys"),
        ("defaults:\n  readme: README.md\n", "Unknown keys"),
        ("version: 2\n", "newer than this pyinit supports"),
        ("defaults:\n  build_requires: []\n", "defaults.build_requires"),
        ("defaults:\n  build_backend: ''\n", "defaults.build_backend"),
        ("defaults:\n  version: null\n", "defaults.version"),
        ("license:\n  timeout_seconds: 0\n", "timeout_seconds"),
        ("license:\n  offline: 'yes'\n", "license.offline"),
    ],
)
def test_invalid_config_raises(tmp_path: Path, text: str, match: str) -> None:
    path = _write(tmp_path / "config.yaml", text)
    with pytest.raises(ConfigError, match=match) as exc:
        load_config(path, environ={})
    assert exc.value.code == "config_error"


def test_missing_explicit_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Failed to read"):
        load_config(tmp_path / "missing.yaml", environ={})


def test_resolve_config_path_precedence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    explicit = tmp_path / "explicit.yaml"

    assert resolve_config_path(explicit, environ={"PYINIT_CONFIG": "/env.yaml"}) == explicit
    assert resolve_config_path(None, environ={"PYINIT_CONFIG": "/env.yaml"}) == Path("/env.yaml")
    assert resolve_config_path(None, environ={}) is None

    user_default = tmp_path / ".config" / "pyinit" / "config.yaml"
    user_default.parent.mkdir(parents=True)
    user_default.write_text("version: 1\n", encoding="utf-8")
    assert resolve_config_path(None, environ={}) == user_default
