"""
Component-tagged loggers for ironclad_client.

Every module logs through ``get_logger(__name__, prefix=...)`` so records from
the transport, the facade and the CLI can be told apart in a shared log:

    [Transport] GET http://localhost:5005/api/clients/app1 -> 200
"""

import logging
from typing import Optional

PACKAGE_LOGGER = "ironclad_client"


class _ComponentAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        return f"[{self.extra['component']}] {msg}", kwargs


def get_logger(name: str, prefix: Optional[str] = None):
    """Return the logger for ``name``, tagging its messages with ``prefix`` when given.

    Names outside the package are nested under ``ironclad_client`` so that a
    single level set on the package logger covers them too.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    logger = logging.getLogger(name)
    if not prefix:
        return logger
    return _ComponentAdapter(logger, {"component": prefix})
