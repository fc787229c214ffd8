# blog/config.py
import os
import tempfile
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _is_production():
    env = os.environ.get("APP_ENV") or os.environ.get("FLASK_ENV") or ""
    return env.strip().lower() == "production"


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "dev-jwt-secret-key-change-me-please-0000")

    # 🗄️ Base de datos
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL", "sqlite:///" + os.path.join(BASE_DIR, "blog.db")
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # 🍪 Cookie de sesión (token firmado)
    AUTH_COOKIE_NAME = os.environ.get("AUTH_COOKIE_NAME", "token")
    COOKIE_SECURE = _env_flag("COOKIE_SECURE", _is_production())
    COOKIE_SAMESITE = os.environ.get("COOKIE_SAMESITE", "None" if _is_production() else "Lax")

    # 🌐 CORS
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()
    ]

    # 🖼️ Portadas
    COVER_STORAGE = os.environ.get("COVER_STORAGE", "local")
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", os.path.join(BASE_DIR, "uploads"))
    UPLOAD_URL_PREFIX = os.environ.get("UPLOAD_URL_PREFIX", "uploads")
    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_CONTENT_LENGTH", 5 * 1024 * 1024))

    CLOUDINARY_CLOUD_NAME = os.environ.get("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_API_KEY = os.environ.get("CLOUDINARY_API_KEY")
    CLOUDINARY_API_SECRET = os.environ.get("CLOUDINARY_API_SECRET")
    CLOUDINARY_FOLDER = os.environ.get("CLOUDINARY_FOLDER", "blog_covers")

    POSTS_PER_PAGE = 20

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # 💻 Cliente web
    BLOG_API_URL = os.environ.get("BLOG_API_URL", "http://localhost:4000")
    API_TIMEOUT = float(os.environ.get("API_TIMEOUT", 10))


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    JWT_SECRET_KEY = "test-jwt-secret-key-with-enough-length-0123456789"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    COOKIE_SECURE = False
    COOKIE_SAMESITE = "Lax"
    COVER_STORAGE = "local"
    UPLOAD_FOLDER = os.path.join(tempfile.gettempdir(), "blog-test-uploads")
    BLOG_API_URL = "http://api.test"
