"""Node-style module resolution for package imports.

Looks a request up the way Node resolves `require()` calls:
- Relative (./, ../) and absolute requests resolve against the base directory
- Bare requests search node_modules directories from the base upward

Each candidate is tried as a file (exact, then with each extension) and then
as a directory (package.json entry fields, then index files).
"""

import asyncio
import json
import logging
import os
from collections.abc import Sequence

from ..errors import ModuleResolutionError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".js", ".json")
DEFAULT_PACKAGE_FIELDS = ("sass", "style", "main")


class NodeModuleResolver:
    """Resolve module requests against node_modules directories.

    Absence returns None. A package.json that cannot be parsed raises
    ModuleResolutionError. With strict=True, absence raises as well,
    matching Node's MODULE_NOT_FOUND behavior.
    """

    def __init__(
        self,
        extensions: Sequence[str] | None = None,
        package_fields: Sequence[str] = DEFAULT_PACKAGE_FIELDS,
        strict: bool = False,
    ):
        self.extensions = tuple(extensions) if extensions is not None else DEFAULT_EXTENSIONS
        self.package_fields = tuple(package_fields)
        self.strict = strict

    async def __call__(self, request: str, basedir: str) -> str | None:
        return await asyncio.to_thread(self.resolve_sync, request, basedir)

    def resolve_sync(self, request: str, basedir: str) -> str | None:
        """Resolve a request from basedir, blocking.

        Args:
            request: Module request (e.g. "bootstrap/scss/grid", "./local")
            basedir: Directory the lookup starts from

        Returns:
            Absolute path to the resolved file, or None when absent

        Raises:
            ModuleResolutionError: Malformed package.json, or absent in strict mode
        """
        basedir = os.path.abspath(basedir)

        if self._is_path_request(request):
            target = os.path.join(basedir, request)
            resolved = self._load_as_file(target) or self._load_as_directory(target)
        else:
            resolved = None
            for modules_dir in self._node_modules_paths(basedir):
                target = os.path.join(modules_dir, request)
                resolved = self._load_as_file(target) or self._load_as_directory(target)
                if resolved:
                    break

        if resolved:
            logger.debug(f"[import:node] {request} -> {resolved}")
            return os.path.abspath(resolved)

        if self.strict:
            raise ModuleResolutionError(
                f"Cannot find module '{request}' from '{basedir}'", request=request, basedir=basedir
            )
        return None

    def _is_path_request(self, request: str) -> bool:
        return (
            request.startswith("./")
            or request.startswith("../")
            or request in (".", "..")
            or os.path.isabs(request)
        )

    def _node_modules_paths(self, basedir: str) -> list[str]:
        """List node_modules directories from basedir up to the filesystem root."""
        paths = []
        current = basedir
        while True:
            if os.path.basename(current) != "node_modules":
                paths.append(os.path.join(current, "node_modules"))
            parent = os.path.dirname(current)
            if parent == current:
                break
            current = parent
        return paths

    def _load_as_file(self, target: str) -> str | None:
        if os.path.isfile(target):
            return target

        for ext in self.extensions:
            candidate = target + ext
            if os.path.isfile(candidate):
                return candidate

        return None

    def _load_as_directory(self, target: str) -> str | None:
        if not os.path.isdir(target):
            return None

        manifest = os.path.join(target, "package.json")
        if os.path.isfile(manifest):
            package = self._read_package_json(manifest)
            for field in self.package_fields:
                entry = package.get(field)
                if not entry or not isinstance(entry, str):
                    continue
                entry_path = os.path.join(target, entry)
                resolved = self._load_as_file(entry_path) or self._load_index(entry_path)
                if resolved:
                    return resolved

        return self._load_index(target)

    def _load_index(self, directory: str) -> str | None:
        if not os.path.isdir(directory):
            return None
        return self._load_as_file(os.path.join(directory, "index"))

    def _read_package_json(self, manifest: str) -> dict:
        try:
            with open(manifest, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ModuleResolutionError(f"Failed to read {manifest}: {e}", basedir=os.path.dirname(manifest)) from e

        if not isinstance(data, dict):
            raise ModuleResolutionError(f"Invalid package.json (expected an object): {manifest}")
        return data

    def __repr__(self) -> str:
        return f"NodeModuleResolver(extensions={list(self.extensions)}, strict={self.strict})"
