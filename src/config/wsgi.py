"""WSGI entry point.

The database connection is opened once when the worker boots and is
never closed explicitly.
"""

import os

from django.conf import settings
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

from modules.core.database import connect_db  # noqa: E402

connect_db(sync=settings.DB_SYNC_ON_STARTUP)
