from __future__ import annotations

import datetime as _dt
import re
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from packaging.utils import canonicalize_name

from license_catalog import LicenseDetails
from manifest_model import IoFailureError

Layout = Literal["src", "flat"]

_NON_IDENTIFIER_RE = re.compile(r"[^a-z0-9_]+")

GITIGNORE_PYTHON = """\
# Byte-compiled / optimized / DLL files
__pycache__/
*.py[cod]
*$py.class

# C extensions
*.so

# Distribution / packaging
.Python
build/
develop-eggs/
dist/
downloads/
eggs/
.eggs/
lib/
lib64/
parts/
sdist/
var/
wheels/
share/python-wheels/
*.egg-info/
.installed.cfg
*.egg
MANIFEST

# Installer logs
pip-log.txt
pip-delete-this-directory.txt

# Unit test / coverage reports
htmlcov/
.tox/
.nox/
.coverage
.coverage.*
.cache
nosetests.xml
coverage.xml
*.cover
.hypothesis/
.pytest_cache/

# Type checkers and linters
.mypy_cache/
.dmypy.json
dmypy.json
.pyre/
.pytype/
.ruff_cache/

# Environments
.env
.venv
env/
venv/
ENV/
env.bak/
venv.bak/

# Jupyter Notebook
.ipynb_checkpoints
"""


def _eprint(*args: object) -> None:
    print(*args, file=sys.stderr)


@dataclass(frozen=True)
class CommandResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str


def _run(argv: list[str], *, cwd: Path, verbose: bool = False) -> CommandResult:
    if verbose:
        _eprint(f"+ ({cwd}) {' '.join(argv)}")
    try:
        proc = subprocess.run(
            argv,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        raise IoFailureError(f"Failed to execute {argv[0]!r}: {e}", details={"argv": argv}) from e
    result = CommandResult(
        argv=argv,
        returncode=proc.returncode,
        stdout=proc.stdout,
        stderr=proc.stderr,
    )
    if result.returncode != 0:
        msg = result.stderr.strip() or result.stdout.strip() or "command failed"
        raise IoFailureError(
            f"{' '.join(argv)}: {msg}",
            details={"argv": argv, "returncode": result.returncode},
        )
    return result


def package_dir_name(project_name: str) -> str:
    """Importable directory name for a project (`My.Cool-App` -> `my_cool_app`)."""
    normalized = canonicalize_name(project_name).replace("-", "_")
    return _NON_IDENTIFIER_RE.sub("_", normalized).strip("_") or "project"


def create_layout(root: Path, project_name: str, layout: Layout) -> Path:
    """Create the package directory for `layout` and an empty `__init__.py` in it.

    An existing `__init__.py` is left untouched.
    """

    pkg = package_dir_name(project_name)
    inner = root / "src" / pkg if layout == "src" else root / pkg
    try:
        inner.mkdir(parents=True, exist_ok=True)
        (inner / "__init__.py").touch(exist_ok=True)
    except OSError as e:
        raise IoFailureError(f"Failed to create {layout} layout at {inner}: {e}") from e
    return inner


def create_venv(root: Path, name: str, *, python: str | None = None, verbose: bool = False) -> Path:
    _run([python or sys.executable, "-m", "venv", name], cwd=root, verbose=verbose)
    return root / name


def init_git(root: Path, *, verbose: bool = False) -> None:
    _run(["git", "init"], cwd=root, verbose=verbose)
    gitignore = root / ".gitignore"
    if gitignore.exists():
        return
    try:
        gitignore.write_text(GITIGNORE_PYTHON, encoding="utf-8", newline="\n")
    except OSError as e:
        raise IoFailureError(f"Failed to write {gitignore}: {e}") from e


def write_license_file(
    root: Path,
    details: LicenseDetails,
    *,
    holder: str = "",
    year: int | None = None,
) -> Path:
    """Write `LICENSE` from a license template, filling `[year]` and `[fullname]`.

    `[fullname]` is kept when no holder is known so it is easy to spot and fix.
    """

    text = details.body.replace("[year]", str(year or _dt.date.today().year))
    if holder:
        text = text.replace("[fullname]", holder)
    out_path = root / "LICENSE"
    try:
        out_path.write_text(text, encoding="utf-8", newline="\n")
    except OSError as e:
        raise IoFailureError(f"Failed to write {out_path}: {e}") from e
    return out_path
