from ._base_service import BaseService
from .requests_service import RequestsService

__all__ = [
    "BaseService",
    "RequestsService",
]
