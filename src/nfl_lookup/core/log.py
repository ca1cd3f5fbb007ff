from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Install a single stream handler on the package logger."""

    root = logging.getLogger("nfl_lookup")
    root.setLevel(level.upper() if isinstance(level, str) else level)
    if not any(getattr(h, "_nfl_lookup", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._nfl_lookup = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    # httpx logs full request URLs, which include the API key.
    logging.getLogger("httpx").setLevel(logging.WARNING)
