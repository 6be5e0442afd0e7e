"""
Platform capabilities

Everything that differs between the Android build and the desktop build
lives behind PlatformCapabilities: where the database file goes and how an
invoice gets printed. The implementation is chosen once at startup by
detect_capabilities(); the rest of the code calls it unconditionally.
"""

import logging
import os
import sys

from core.config import DEFAULT_DB_FILENAME, get_settings
from core.errors import ErrorKind, RepositoryError

logger = logging.getLogger(__name__)

# Prefix the frontend recognises as "forward this to the native print service"
PRINT_SENTINEL = "PRINT"
DEFAULT_JOB_NAME = "Invoice"


class PlatformCapabilities:
    name = "base"

    def database_path(self) -> str:
        raise NotImplementedError

    def print_invoice(self, text: str, job_name: str | None = None) -> str:
        raise NotImplementedError


class DesktopCapabilities(PlatformCapabilities):
    name = "desktop"

    def database_path(self) -> str:
        return DEFAULT_DB_FILENAME

    def print_invoice(self, text: str, job_name: str | None = None) -> str:
        raise RepositoryError(ErrorKind.UNSUPPORTED, "Printing only available on Android")


class AndroidCapabilities(PlatformCapabilities):
    name = "android"

    def database_path(self) -> str:
        # App-private storage; HOME points there on Android
        home = os.getenv("HOME")
        if not home:
            logger.warning("HOME not set, using default %s", DEFAULT_DB_FILENAME)
            return DEFAULT_DB_FILENAME
        path = os.path.join(home, DEFAULT_DB_FILENAME)
        logger.info("Using Android database path: %s", path)
        return path

    def print_invoice(self, text: str, job_name: str | None = None) -> str:
        # The native side does the printing; hand the frontend a command string
        return f"{PRINT_SENTINEL}:{job_name or DEFAULT_JOB_NAME}:{text}"


_PROVIDERS = {
    "android": AndroidCapabilities,
    "desktop": DesktopCapabilities,
}


def is_android() -> bool:
    return hasattr(sys, "getandroidapilevel")


def detect_capabilities(platform_name: str | None = None) -> PlatformCapabilities:
    """Return the capability provider for this process.

    Order: explicit argument, PATIENTS_PLATFORM, then runtime detection.
    Unknown names fall back to desktop.
    """
    name = platform_name or get_settings().platform
    if not name:
        name = "android" if is_android() else "desktop"

    provider = _PROVIDERS.get(name.lower())
    if provider is None:
        logger.warning("Unknown platform %r, using desktop capabilities", name)
        provider = DesktopCapabilities
    return provider()
