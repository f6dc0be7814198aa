"""Git Gateway - tracked status and attributes via the `git` command line."""

import logging
import os
import subprocess
from typing import Optional

from check_typo.domain.constants import DEFAULT_ATTRIBUTE
from check_typo.domain.protocols import VersionControlProtocol

logger = logging.getLogger(__name__)

# Same heuristic git uses: a NUL byte in the first 8000 bytes means binary.
BINARY_SNIFF_BYTES = 8000


class GitAttributesGateway(VersionControlProtocol):
    """
    Answers is_tracked / is_binary / attribute by running git.

    The tracked set is listed once per gateway (`git ls-files -z` from the
    repository root). Both attributes of a path come from a single
    `git check-attr` call, cached per path. When git cannot be run (no
    binary, not a repository), every file is reported untracked with no
    attributes, and the problem is logged once.
    """

    def __init__(self, attribute: str = DEFAULT_ATTRIBUTE, git: str = "git") -> None:
        self._attribute = attribute
        self._git = git
        self._unavailable_logged = False
        self._tracked: Optional[frozenset[str]] = None
        self._attr_cache: dict[str, dict[str, str]] = {}

    def _run(self, *args: str) -> Optional[subprocess.CompletedProcess[str]]:
        try:
            return subprocess.run(
                [self._git, *args],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            if not self._unavailable_logged:
                logger.warning("git is not available (%s); only explicit files are checked", exc)
                self._unavailable_logged = True
            return None

    def is_tracked(self, path: str) -> bool:
        # Resolve the directory only: a tracked symlink is listed under its own name.
        absolute = os.path.abspath(path)
        directory = os.path.realpath(os.path.dirname(absolute))
        return os.path.join(directory, os.path.basename(absolute)) in self._tracked_files()

    def attribute(self, path: str) -> str:
        return self._check_attr(path).get(self._attribute, "")

    def is_binary(self, path: str) -> bool:
        if self._check_attr(path).get("binary") == "set":
            return True
        if os.path.isdir(path):
            return False
        try:
            with open(path, "rb") as f:
                return b"\0" in f.read(BINARY_SNIFF_BYTES)
        except OSError as exc:
            logger.warning("%s: cannot read (%s)", path, exc)
            return False

    def _tracked_files(self) -> frozenset[str]:
        """Real paths of every file git tracks in the current repository."""
        if self._tracked is not None:
            return self._tracked
        self._tracked = frozenset()
        top = self._run("rev-parse", "--show-toplevel")
        if top is None or top.returncode != 0:
            logger.debug("not inside a git work tree; no file is tracked")
            return self._tracked
        root = os.path.realpath(top.stdout.strip())
        listing = self._run("-C", root, "ls-files", "-z")
        if listing is not None and listing.returncode == 0:
            self._tracked = frozenset(
                os.path.normpath(os.path.join(root, name))
                for name in listing.stdout.split("\0")
                if name
            )
        return self._tracked

    def _check_attr(self, path: str) -> dict[str, str]:
        """Values printed by `git check-attr <attribute> binary -- PATH` ({} on failure)."""
        cached = self._attr_cache.get(path)
        if cached is not None:
            return cached
        values: dict[str, str] = {}
        names = list(dict.fromkeys((self._attribute, "binary")))
        result = self._run("check-attr", *names, "--", path)
        if result is not None and result.returncode == 0:
            # One "<path>: <attribute>: <value>" line per attribute, in request order.
            for name, line in zip(names, result.stdout.splitlines()):
                prefix = f": {name}: "
                idx = line.rfind(prefix)
                if idx != -1:
                    values[name] = line[idx + len(prefix):].strip()
        self._attr_cache[path] = values
        return values
