"""
ASGI config for the hms project.

Plain HTTP only; every endpoint is a synchronous request/response view.
"""
import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "hms.settings")

from django.core.asgi import get_asgi_application  # noqa: E402

application = get_asgi_application()
