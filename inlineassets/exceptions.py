"""Exceptions raised by the inline-assets transform."""


class InlineAssetsError(Exception):
    """Base class for errors raised by this package."""


class UnsupportedEncodingError(InlineAssetsError, ValueError):
    """The configured data URI encoding has no known byte-to-text codec."""

    def __init__(self, encoding: str) -> None:
        super().__init__(f"Unsupported data URI encoding: {encoding!r}")
        self.encoding = encoding
