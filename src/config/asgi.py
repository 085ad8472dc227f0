"""ASGI entry point (see ``config.wsgi`` for the start-up sequence)."""

import os

from django.conf import settings
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_asgi_application()

from modules.core.database import connect_db  # noqa: E402

connect_db(sync=settings.DB_SYNC_ON_STARTUP)
