# config/settings.py
"""
Shim so DJANGO_SETTINGS_MODULE='config.settings' works.
DJANGO_ENV=prod picks the hardened settings; anything else runs dev.
"""
import os

if os.environ.get("DJANGO_ENV", "dev").lower() == "prod":
    from .prod import *  # noqa
else:
    from .dev import *  # noqa
