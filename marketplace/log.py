import logging

from rich.logging import RichHandler


def configure_logging(level: str = "INFO") -> None:
    """Route SDK logs through rich. Only entry points call this."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
    # urllib3 / httpx are chatty at DEBUG
    for noisy in ("urllib3", "httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
