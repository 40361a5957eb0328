"""HTTP primitives — immutable request and response values."""

from roost.http.request import Request
from roost.http.response import AnyResponse, FileResponse, Response

__all__ = ["AnyResponse", "FileResponse", "Request", "Response"]
