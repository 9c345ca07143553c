"""Locate the source file behind a profiled logical path.

Profiles name files by import path, e.g. ``example.com/mod/pkg/file.go``.
Two strategies map that back to disk:

1. Module fast path: walk up from the working directory to the nearest
   module file (``go.mod``), strip the declared module name from the logical
   path and join the remainder to the module root.
2. Package lookup: ask a PackageLocator for the directory of the file's
   import path and join the base name to it.
"""

from __future__ import annotations

import os
import posixpath
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from gocoveralls.core.errors import SourceNotFoundError
from gocoveralls.core.logging import get_logger

log = get_logger(__name__)


class PackageLocator(Protocol):
    """Maps an import path to the package directory on disk."""

    def find_package_dir(self, import_path: str) -> Path | None:
        """Return the package directory, or None if it can't be located."""
        ...


class GopathLocator:
    """Looks for ``<entry>/src/<import path>`` in each GOPATH entry."""

    def __init__(self, gopath: str | None = None) -> None:
        raw = gopath if gopath is not None else os.environ.get("GOPATH", "")
        entries = [Path(p).expanduser() for p in raw.split(os.pathsep) if p]
        self._roots = entries or [Path("~/go").expanduser()]

    @property
    def roots(self) -> list[Path]:
        return list(self._roots)

    def find_package_dir(self, import_path: str) -> Path | None:
        if not import_path:
            return None
        for root in self._roots:
            candidate = root / "src" / import_path
            if candidate.is_dir():
                return candidate
        return None


class GoListLocator:
    """Asks the go toolchain (``go list -find``) for the package directory."""

    def __init__(
        self,
        go_binary: str = "go",
        *,
        cwd: Path | None = None,
        timeout: float = 30,
    ) -> None:
        self._go = go_binary
        self._cwd = cwd
        self._timeout = timeout

    def find_package_dir(self, import_path: str) -> Path | None:
        if not import_path:
            return None
        try:
            result = subprocess.run(
                [self._go, "list", "-find", "-f", "{{.Dir}}", import_path],
                cwd=str(self._cwd) if self._cwd else None,
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            log.debug("go_list_failed", import_path=import_path, error=str(e))
            return None
        if result.returncode != 0:
            log.debug("go_list_failed", import_path=import_path, stderr=result.stderr.strip())
            return None
        out = result.stdout.strip()
        return Path(out) if out else None


class ChainLocator:
    """Tries each locator in order; the first hit wins."""

    def __init__(self, locators: Sequence[PackageLocator]) -> None:
        self._locators = tuple(locators)

    def find_package_dir(self, import_path: str) -> Path | None:
        for locator in self._locators:
            found = locator.find_package_dir(import_path)
            if found is not None:
                return found
        return None


def default_locator() -> PackageLocator:
    return ChainLocator([GopathLocator(), GoListLocator()])


def read_module_name(module_file: Path) -> str:
    """Return the module path declared in a go.mod, or "" if none.

    The first line starting with ``module`` wins; its second field is the name.
    """
    try:
        contents = module_file.read_text()
    except (OSError, UnicodeDecodeError) as e:
        log.warning("module_file_unreadable", path=str(module_file), error=str(e))
        return ""
    for line in contents.split("\n"):
        if line.startswith("module"):
            fields = line.split()
            if len(fields) > 1:
                return fields[1].strip('"`')
    return ""


def find_module_root(start: Path, module_file: str = "go.mod") -> Path | None:
    """Nearest directory at or above ``start`` holding a regular module file."""
    current = start.resolve()
    for directory in (current, *current.parents):
        if (directory / module_file).is_file():
            return directory
    return None


class FileResolver:
    """Resolves logical profile paths to absolute source paths."""

    def __init__(
        self,
        locator: PackageLocator | None = None,
        *,
        module_file: str = "go.mod",
        cwd: Path | None = None,
    ) -> None:
        self._locator = locator if locator is not None else default_locator()
        self._module_file = module_file
        self._cwd = cwd

    def _module_path(self, logical_path: str) -> Path | None:
        cwd = self._cwd or Path.cwd()
        root = find_module_root(cwd, self._module_file)
        if root is None:
            log.debug("module_file_not_found", cwd=str(cwd), module_file=self._module_file)
            return None

        module_name = read_module_name(root / self._module_file)
        if not module_name:
            log.debug("module_name_missing", root=str(root))
            return None

        remainder = logical_path.removeprefix(module_name).lstrip("/")
        candidate = root / remainder
        if candidate.is_file():
            return candidate
        return None

    def resolve(self, logical_path: str) -> Path:
        """Return the absolute path of the profiled file.

        Raises:
            SourceNotFoundError: If neither strategy finds the file.
        """
        if found := self._module_path(logical_path):
            return found

        log.debug("module_path_miss", file=logical_path)
        import_path, base = posixpath.split(logical_path)
        package_dir = self._locator.find_package_dir(import_path)
        if package_dir is None:
            raise SourceNotFoundError.for_path(
                logical_path, f"package {import_path!r} not found"
            )
        return (package_dir / base).absolute()
