"""WSGI entrypoint for Capital Cargo."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "capitalcargo.settings")

application = get_wsgi_application()
