class ValidationError(Exception):
    """Inbound request could not be decoded."""


class UpstreamError(Exception):
    """Any failure while talking to the weather provider."""


class UpstreamUnavailableError(UpstreamError):
    """Request could not be completed (connect, DNS, timeout, bad URL)."""


class UpstreamContentTypeError(UpstreamError):
    """Response was not declared as application/json."""


class UpstreamReadError(UpstreamError):
    """Response body could not be read."""


class UpstreamDecodeError(UpstreamError):
    """Response body is not a weather record."""
