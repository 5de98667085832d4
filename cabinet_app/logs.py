import logging

from rich.logging import RichHandler


_configured = False


def configure_logging(level: str | int = logging.INFO) -> None:
    """Send the `cabinet` and `cabinet_app` loggers to a rich console handler.

    Only the first call does anything.
    """
    global _configured
    if _configured:
        return

    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    for name in ("cabinet", "cabinet_app"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.addHandler(handler)

    _configured = True
