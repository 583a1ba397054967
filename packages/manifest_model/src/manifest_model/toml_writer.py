from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.toml_document import TOMLDocument

from manifest_model.errors import IoFailureError, SerializationFailureError
from manifest_model.model import Manifest


def _is_empty(value: Any) -> bool:
    return isinstance(value, (str, list)) and not value


def _document_value(value: Any) -> Any:
    if isinstance(value, list):
        return [_document_value(item) for item in value]
    as_document_value = getattr(value, "as_document_value", None)
    if callable(as_document_value):
        return as_document_value()
    return value


def _table(obj: Any) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for f in dataclasses.fields(obj):
        value = getattr(obj, f.name)
        if f.metadata.get("omit_empty") and _is_empty(value):
            continue
        out[f.name.replace("_", "-")] = _document_value(value)
    return out


def manifest_to_document(manifest: Manifest) -> dict[str, dict[str, Any]]:
    """Map a manifest to plain TOML-ready tables.

    Keys are hyphenated, contributors become a string or a `{name, email}` mapping,
    and optional fields holding an empty value are left out entirely.
    """
    return {
        "build-system": _table(manifest.build_system),
        "project": _table(manifest.project),
    }


def _toml_item(value: Any) -> Any:
    # Lists stay inline arrays and mappings stay inline tables, so a list of
    # contributors never turns into an array of tables.
    if isinstance(value, list):
        arr = tomlkit.array()
        for v in value:
            arr.append(_toml_item(v))
        return arr
    if isinstance(value, dict):
        inline = tomlkit.inline_table()
        inline.update({k: _toml_item(v) for k, v in value.items()})
        return inline
    return value


def _toml_document(manifest: Manifest) -> TOMLDocument:
    doc = tomlkit.document()
    for table_name, values in manifest_to_document(manifest).items():
        table = tomlkit.table()
        for key, value in values.items():
            table.add(key, _toml_item(value))
        doc.add(table_name, table)
    return doc


def render_manifest(manifest: Manifest) -> str:
    try:
        text = tomlkit.dumps(_toml_document(manifest))
        text.encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationFailureError(f"Cannot serialize manifest: {exc}") from exc
    return text


def write_manifest(manifest: Manifest, path: Path) -> None:
    """Serialize `manifest` and write it to `path`, replacing any existing file."""
    text = render_manifest(manifest)

    tmp_out = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp_out.write_text(text, encoding="utf-8", newline="\n")
        os.replace(tmp_out, path)
    except OSError as exc:
        try:
            if tmp_out.exists():
                tmp_out.unlink()
        except OSError:
            pass
        raise IoFailureError(f"Failed to write {path}: {exc}", details={"path": str(path)}) from exc
