from __future__ import annotations

import structlog
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand

from modules.core.database import connect_db

logger = structlog.get_logger(__name__)


class Command(BaseCommand):
    help = "Connect to the database and start the development server on PORT."

    def add_arguments(self, parser):
        parser.add_argument("--host", default="0.0.0.0")
        parser.add_argument("--port", type=int, default=None)
        parser.add_argument(
            "--noreload",
            action="store_false",
            dest="use_reloader",
            help="Do not use the auto-reloader.",
        )

    def handle(self, *args, **options):
        port = options["port"] or settings.PORT
        connect_db(sync=settings.DB_SYNC_ON_STARTUP)

        url = f"http://localhost:{port}"
        logger.info("server_listening", url=url)
        self.stdout.write(self.style.SUCCESS(f"REST API en el puerto {url}"))

        call_command(
            "runserver",
            f"{options['host']}:{port}",
            use_reloader=options["use_reloader"],
        )
