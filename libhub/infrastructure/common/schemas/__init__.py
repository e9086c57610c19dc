from .camel_model import CamelModel
from .response_wrappers import MessageResponse, PaginatedResponse

__all__ = [
    "CamelModel",
    "MessageResponse",
    "PaginatedResponse",
]
