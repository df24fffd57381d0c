from .auth_controller import router as auth_router
from .user_controller import router as user_router
from .errors import register_exception_handlers


__all__ = ["auth_router", "user_router", "register_exception_handlers"]
