"""Logging setup - everything goes to stderr so stdout stays free for the MCP stdio protocol."""

import logging
import sys


def setup_logging(verbose: bool = False):
    """Log to stderr. ERROR level when serving MCP, INFO with module names for CLI use."""
    level = logging.INFO if verbose else logging.ERROR
    fmt = "%(name)s: %(message)s" if verbose else "%(message)s"
    logging.basicConfig(level=level, format=fmt, stream=sys.stderr, force=True)

    # httpx logs every request line at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
