import tempfile

from .base import *

DEBUG = False

SECRET_KEY = "test-secret"
ALLOWED_HOSTS = ["testserver", "127.0.0.1", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

MEDIA_ROOT = Path(tempfile.mkdtemp(prefix="userdesk-media-"))
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
}

VISION_PROVIDER = "mock"
VISION_ENDPOINT = "https://vision.test"
VISION_KEY = "test-key"

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

LOGGING["handlers"]["console"]["formatter"] = "simple"
LOG_LEVEL = "WARNING"
for _name in ("django", "userdesk", "users", "intake"):
    LOGGING["loggers"][_name]["level"] = LOG_LEVEL
