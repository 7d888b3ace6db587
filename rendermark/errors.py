"""Rendermark exception hierarchy.

Conversion itself never raises; the only failure surface is fetching the
source document.
"""


class RendermarkError(Exception):
    """Base exception for all Rendermark errors."""


class DocumentFetchError(RendermarkError):
    """Raised when the source document cannot be retrieved."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")
