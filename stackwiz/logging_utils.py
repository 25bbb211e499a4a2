from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(
    level: int = logging.WARNING,
    log_file: Path | None = None,
) -> None:
    """Configure logging.

    Log records go to stderr through rich, so they never interleave with
    the prompts on stdout. When ``log_file`` is set, everything at ``level``
    and above is also written there with timestamps.

    Calling this more than once updates the level and adds a log file that
    is not attached yet; handlers are never duplicated.

    Raises OSError if ``log_file`` cannot be opened. Nothing is installed in
    that case.
    """

    root = logging.getLogger()

    file_handler: logging.Handler | None = None
    if log_file is not None and getattr(root, "_stackwiz_log_file", None) != str(log_file):
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S%z",
            )
        )

    root.setLevel(level)

    if not getattr(root, "_stackwiz_configured", False):
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(console_handler)
        setattr(root, "_stackwiz_configured", True)

    if file_handler is not None:
        root.addHandler(file_handler)
        setattr(root, "_stackwiz_log_file", str(log_file))

    logging.getLogger(__name__).debug("Logging initialized (level=%s, file=%s)", level, log_file)
