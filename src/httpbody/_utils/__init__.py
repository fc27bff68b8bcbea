from ._logs import setup_logging
from ._mime import mime_type_of, sniff_mime_type
from ._multipart import MultipartWriter, format_form_param, make_boundary
from ._request_spec import RequestSpec

__all__ = [
    "MultipartWriter",
    "RequestSpec",
    "format_form_param",
    "make_boundary",
    "mime_type_of",
    "setup_logging",
    "sniff_mime_type",
]
