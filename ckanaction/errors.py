"""Exceptions raised by the client for local and transport failures.

Application-level failures reported by CKAN inside a JSON envelope
(``{"success": false, ...}``) are not errors here; they come back as the
decoded response.
"""


class CKANError(RuntimeError):
    """Base class for every failure raised by ckanaction."""


class BodyEncodingError(CKANError, ValueError):
    """The request body could not be serialized to JSON."""


class TransportError(CKANError):
    """The HTTP request could not be completed (DNS, connect, TLS, timeout, bad URL)."""


class UploadError(CKANError, OSError):
    """The file to upload could not be opened or read."""


class ResponseDecodeError(CKANError, ValueError):
    """The response body was not valid UTF-8 JSON."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
