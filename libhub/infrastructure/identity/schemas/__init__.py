from .user_schemas import UserRegisterRequest, UserResponse

__all__ = [
    "UserRegisterRequest",
    "UserResponse",
]
