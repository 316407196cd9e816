"""Parallax exception hierarchy.

All public exceptions inherit from ParallaxError. The trust pipeline itself
never raises: these exceptions are used inside the discovery layer, where
each one is caught and degraded to an "absent" field before a record ever
reaches the core.
"""


class ParallaxError(Exception):
    """Base exception for all Parallax errors."""


class ManifestError(ParallaxError):
    """Raised when a click package manifest cannot be read.

    Covers unreadable files, invalid JSON, and documents whose top level
    is not a JSON object.
    """
