from ckanaction.body import build_body
from ckanaction.client import CKAN
from ckanaction.errors import (
    BodyEncodingError,
    CKANError,
    ResponseDecodeError,
    TransportError,
    UploadError,
)
from ckanaction.schemas import ActionResponse

__all__ = [
    "ActionResponse",
    "BodyEncodingError",
    "CKAN",
    "CKANError",
    "ResponseDecodeError",
    "TransportError",
    "UploadError",
    "build_body",
]
