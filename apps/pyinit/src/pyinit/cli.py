from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from license_catalog import LicenseClient
from manifest_model import (
    MANIFEST_FILENAME,
    ComplexContributor,
    IoFailureError,
    Manifest,
    ManifestError,
    write_manifest,
)

from pyinit import __version__
from pyinit.bootstrap import create_layout, create_venv, init_git, write_license_file
from pyinit.collect import collect_manifest
from pyinit.config import load_config, resolve_config_path
from pyinit.prompts import Prompter, RichPrompter


def _eprint(*args: object) -> None:
    print(*args, file=sys.stderr)


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("-v", "--verbose", action="store_true", help="Print diagnostics to stderr.")
    p.add_argument(
        "-c",
        "--complete",
        action="store_true",
        help="Ask every pyproject.toml field (default: build-system, name and version only).",
    )
    p.add_argument("--git", action="store_true", help="Initialize a git repository with a Python .gitignore.")
    p.add_argument("--venv", metavar="NAME", help="Create a virtual environment with this name.")
    p.add_argument(
        "--layout",
        choices=("src", "flat"),
        help="Create a package directory (src/<pkg>/ or <pkg>/) with an empty __init__.py.",
    )
    p.add_argument(
        "--offline",
        action="store_true",
        help="Do not fetch the license list; ask for the license as free text.",
    )
    p.add_argument(
        "--license-file",
        action="store_true",
        help="Write a LICENSE file for the selected license (complete mode, online only).",
    )
    p.add_argument(
        "--config",
        type=Path,
        help="Path to a pyinit config.yaml (default: $PYINIT_CONFIG or ~/.config/pyinit/config.yaml).",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyinit",
        description="Interactively generate a pyproject.toml and optional project scaffolding.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="cmd", required=True)

    new_p = sub.add_parser("new", help="Create FOLDER and initialize a project inside it.")
    new_p.add_argument("folder", type=Path, help="Folder to create (must not exist).")
    _add_common_args(new_p)

    init_p = sub.add_parser("init", help="Initialize a project in the current directory.")
    _add_common_args(init_p)
    return parser


def _license_holder(manifest: Manifest) -> str:
    if not manifest.project.authors:
        return ""
    first = manifest.project.authors[0]
    if isinstance(first, ComplexContributor):
        return first.name
    return first.name_or_email


def _scaffold(
    args: argparse.Namespace,
    project_root: Path,
    *,
    make_prompter: Callable[[], Prompter],
) -> int:
    verbose = bool(args.verbose)
    config_path = resolve_config_path(args.config)
    config = load_config(config_path)
    if verbose and config.source_path is not None:
        _eprint(f"config: {config.source_path}")

    client: LicenseClient | None = None
    license_source: Callable[[], Sequence[str]] | None = None
    if args.complete and not (args.offline or config.offline):
        client = LicenseClient(
            api_url=config.license_api_url,
            timeout_seconds=config.license_timeout_seconds,
            user_agent=f"pyinit/{__version__}",
        )
        if verbose:
            _eprint(f"license catalog: {client.api_url}/licenses")
        license_source = client.fetch_license_ids

    manifest = collect_manifest(
        make_prompter(),
        complete=bool(args.complete),
        project_root=project_root,
        defaults=config.defaults,
        license_source=license_source,
    )

    manifest_path = project_root / MANIFEST_FILENAME
    write_manifest(manifest, manifest_path)
    if verbose:
        _eprint(f"wrote {manifest_path}")

    if args.layout:
        inner = create_layout(project_root, manifest.project.name, args.layout)
        if verbose:
            _eprint(f"created {inner}")
    if args.venv:
        create_venv(project_root, args.venv, verbose=verbose)
    if args.git:
        init_git(project_root, verbose=verbose)
    if args.license_file:
        if client is None or not manifest.project.license:
            _eprint("WARNING: --license-file needs --complete, the online license list and a license; skipped.")
        else:
            details = client.fetch_license_body(manifest.project.license)
            license_path = write_license_file(project_root, details, holder=_license_holder(manifest))
            if verbose:
                _eprint(f"wrote {license_path}")

    print(str(manifest_path))
    return 0


def _cmd_new(args: argparse.Namespace) -> int:
    """Create the target folder, then scaffold inside it."""
    folder: Path = args.folder
    try:
        folder.mkdir()
    except OSError as e:
        raise IoFailureError(f"Failed to create {folder}: {e}") from e
    return _scaffold(args, folder.resolve(), make_prompter=RichPrompter)


def _cmd_init(args: argparse.Namespace) -> int:
    """Scaffold the current working directory."""
    return _scaffold(args, Path.cwd(), make_prompter=RichPrompter)


def main(argv: list[str] | None = None) -> None:
    """Run the CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        if args.cmd == "new":
            raise SystemExit(_cmd_new(args))
        if args.cmd == "init":
            raise SystemExit(_cmd_init(args))
    except ManifestError as e:
        _eprint(f"error: {e}")
        raise SystemExit(1) from e
    except KeyboardInterrupt:
        _eprint("aborted")
        raise SystemExit(130) from None
    raise SystemExit(2)


if __name__ == "__main__":
    main()
