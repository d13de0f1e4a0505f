"""
Logging facility for ldm-binding

Named loggers are created at import time; handlers and level are attached
once by setup_logging (the CLI calls it, library users may not).
"""

import logging

LOG_FORMAT = "%(name)-12s %(levelname)-10s %(asctime)s %(message)s"

ldm_logger = logging.getLogger("ldm")
catalog_logger = logging.getLogger("ldm.catalog")
cli_logger = logging.getLogger("ldm.cli")

_configured = False


def setup_logging(level: int | str = logging.WARNING) -> None:
    """Configure the root handler once; later calls only adjust the level."""
    global _configured

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    level = min(max(int(level), 0), 50)

    if not _configured:
        logging.basicConfig(format=LOG_FORMAT, level=level)
        _configured = True
    ldm_logger.setLevel(level)
    ldm_logger.debug("Set log level to %s", level)
