# blog/models/__init__.py
"""
Modelos de la aplicación.
Importa aquí los modelos para que puedan ser referenciados como:
from blog.models import Post
"""
from .user import User
from .post import Post

__all__ = ["Post", "User"]
