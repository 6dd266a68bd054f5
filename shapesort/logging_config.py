"""Logging setup for the shapesort entry points."""
import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger; log records go to stderr."""
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)
