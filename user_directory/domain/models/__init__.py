from .user import User
from .page import Page

__all__ = ["User", "Page"]
