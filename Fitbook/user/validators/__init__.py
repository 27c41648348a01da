from .login import authenticate_user

__all__ = ["authenticate_user"]
