# src/taskpad/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Loggers that fire once per store/view-model mutation. The REPL already echoes
# every mutation back to the user, so these only reach the console at WARNING+.
CHATTY_PREFIXES = ("taskpad.tasks.", "taskpad.presentation.")

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"


class _MutationChatterFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(CHATTY_PREFIXES):
            return record.levelno >= logging.WARNING
        return True


def setup_logging(
    *,
    console_level: int = logging.INFO,
    log_file: str | Path | None = None,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure root logging for the console app.

    - stderr gets console_level and up, minus per-mutation chatter
    - log_file (optional) gets file_level and up, unfiltered; tasks themselves are never written to disk

    Call once from main(); existing root handlers are replaced.
    """
    root = logging.getLogger()
    root.setLevel(min(console_level, file_level) if log_file else console_level)
    for h in list(root.handlers):
        root.removeHandler(h)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console.addFilter(_MutationChatterFilter())
    root.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(fh)
