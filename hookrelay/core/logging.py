import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Set up the root logger once for the whole process"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # httpx logs full request URLs at INFO, which would leak the Discord webhook token
    logging.getLogger("httpx").setLevel(logging.WARNING)
