from .config import Settings, get_settings
from .security import (
    hash_password,
    verify_password,
    BcryptPasswordHasher,
)

__all__ = [
    "Settings",
    "get_settings",
    "hash_password",
    "verify_password",
    "BcryptPasswordHasher",
]
