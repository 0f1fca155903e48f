from .auth import LoginRequestDTO
from .posts import CreatePostRequestDTO

__all__ = ["CreatePostRequestDTO", "LoginRequestDTO"]
