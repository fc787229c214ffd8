# blog/auth/__init__.py
from .decorators import load_user, login_required

__all__ = ["load_user", "login_required"]
