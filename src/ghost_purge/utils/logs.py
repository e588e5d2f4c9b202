import logging

from rich.logging import RichHandler

LOG_FORMAT = "[%(name)s] %(message)s"


def setup_logging(level: str | int = "INFO") -> None:
    """Route all logging through a rich console handler."""
    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)
