"""
WSGI config for the xpresa_site project.

It exposes the WSGI callable as a module-level variable named ``application``.

For more information on this file, see
https://docs.djangoproject.com/en/5.2/howto/deployment/wsgi/
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "xpresa_site.settings")

application = get_wsgi_application()

from django.core.management import call_command  # noqa: E402
from django.db.utils import OperationalError  # noqa: E402

try:
    call_command("migrate", interactive=False)
except OperationalError:
    # Auth/session database may be unavailable when the server starts.
    pass
