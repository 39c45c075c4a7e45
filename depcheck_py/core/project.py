"""Project file enumeration."""

import os
import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..config import DEFAULT_EXCLUDE
from ..utils.logging import get_logger

logger = get_logger(__name__)

IGNORE_FILENAME = ".depcheckignore"


def read_ignore_file(path: Path) -> List[str]:
    """Read exclude patterns (one regex per line, ``#`` comments)."""
    patterns = []
    for line in path.read_text().splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            patterns.append(line)
    return patterns


class ProjectFiles:
    """
    Files of a project rooted at ``target``.

    Paths are root-relative and use forward slashes. Exclude patterns are
    regular expressions searched against those relative paths; a
    ``.depcheckignore`` file at the root adds more.
    """

    def __init__(
        self,
        target: Union[str, Path],
        exclude: Optional[Iterable[str]] = None,
    ):
        self.root = str(Path(target).resolve())
        patterns = list(DEFAULT_EXCLUDE if exclude is None else exclude)

        ignore_file = Path(self.root) / IGNORE_FILENAME
        if ignore_file.is_file():
            patterns.extend(read_ignore_file(ignore_file))

        try:
            self._exclude = [re.compile(p) for p in patterns]
        except re.error as e:
            raise ValueError(f"Invalid exclude pattern: {e}")

        self._files: Optional[List[str]] = None

    def _excluded(self, relpath: str) -> bool:
        return any(p.search(relpath) for p in self._exclude)

    def _walk(self) -> List[str]:
        files = []
        for dirpath, dirnames, filenames in os.walk(self.root):
            rel_dir = os.path.relpath(dirpath, self.root)
            prefix = "" if rel_dir == "." else rel_dir.replace(os.sep, "/") + "/"
            # Prune excluded directories
            dirnames[:] = [d for d in dirnames if not self._excluded(f"{prefix}{d}/")]
            for name in filenames:
                relpath = f"{prefix}{name}"
                if not self._excluded(relpath):
                    files.append(relpath)
        files.sort()
        logger.debug(f"Found {len(files)} files under {self.root}")
        return files

    def all(self) -> List[str]:
        """Return every non-excluded file, sorted."""
        if self._files is None:
            self._files = self._walk()
        return list(self._files)
