"""Filesystem Gateway - discovery of candidate files and lazy reading of their records."""

import logging
import os
from collections.abc import Iterable, Iterator, Sequence

from check_typo.domain.constants import DEFAULT_EXCLUDE_DIRS, SENTINEL_PRUNE
from check_typo.domain.exemptions import parse_attribute
from check_typo.domain.protocols import FileSystemProtocol, VersionControlProtocol
from check_typo.domain.scanner import iter_records

logger = logging.getLogger(__name__)


class FileSystemGateway(FileSystemProtocol):
    """Walks directories in sorted order and streams files in binary mode."""

    def __init__(self, exclude_dirs: Sequence[str] = DEFAULT_EXCLUDE_DIRS) -> None:
        self._exclude_dirs = frozenset(exclude_dirs)

    def iter_candidates(
        self, paths: Iterable[str], vcs: VersionControlProtocol
    ) -> Iterator[tuple[str, bool]]:
        """Yield (path, is_explicit). Files named directly are explicit; walked ones are not."""
        for path in paths:
            if os.path.isdir(path):
                yield from self._walk(path, vcs)
            elif os.path.isfile(path):
                if self._is_readable(path):
                    yield path, True
            else:
                logger.warning("%s: no such file or directory", path)

    def _walk(self, root: str, vcs: VersionControlProtocol) -> Iterator[tuple[str, bool]]:
        for dirpath, dirnames, filenames in os.walk(root):
            kept: list[str] = []
            for name in sorted(dirnames):
                sub = os.path.normpath(os.path.join(dirpath, name))
                if name in self._exclude_dirs or self._is_pruned(sub, vcs):
                    logger.debug("%s: pruned", sub)
                    continue
                kept.append(name)
            dirnames[:] = kept
            for name in sorted(filenames):
                path = os.path.normpath(os.path.join(dirpath, name))
                if self._is_readable(path):
                    yield path, False

    @staticmethod
    def _is_readable(path: str) -> bool:
        if os.access(path, os.R_OK):
            return True
        logger.warning("%s: not readable, skipped", path)
        return False

    @staticmethod
    def _is_pruned(path: str, vcs: VersionControlProtocol) -> bool:
        return SENTINEL_PRUNE in parse_attribute(vcs.attribute(path))

    def open_records(self, path: str) -> Iterator[bytes]:
        """Generator: the file is only opened once iteration starts."""
        with open(path, "rb") as f:
            yield from iter_records(f)
