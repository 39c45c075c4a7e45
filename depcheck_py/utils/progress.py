"""Terminal progress indicator for long-running scans."""

import sys
from typing import Any


class Spinner:
    """A spinner for indeterminate progress."""

    CHARS = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"

    def __init__(self, message: str = "Processing...", file: Any = None):
        self.message = message
        self.file = file or sys.stderr
        self._frame = 0

    def _is_tty(self) -> bool:
        """Check if output is a terminal."""
        return hasattr(self.file, "isatty") and self.file.isatty()

    def spin(self) -> None:
        """Advance spinner by one frame."""
        if not self._is_tty():
            return
        char = self.CHARS[self._frame % len(self.CHARS)]
        self.file.write(f"\r\033[K{char} {self.message}")
        self.file.flush()
        self._frame += 1

    def finish(self, message: str = "", success: bool = True) -> None:
        """Clear the spinner line and print a final status."""
        if self._is_tty():
            self.file.write("\r\033[K")
        icon = "✅" if success else "❌"
        self.file.write(f"{icon} {message or self.message}\n")
        self.file.flush()
