from .users_controller import router as users_router
from .error_handlers import register_exception_handlers
from .links import USERS_ROUTE


__all__ = ["users_router", "register_exception_handlers", "USERS_ROUTE"]
