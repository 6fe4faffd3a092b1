"""
Development request logger.

Enabled only while ``DEBUG`` is on; logs ``"<METHOD> <path>"`` for every
incoming request.
"""

import logging

from django.conf import settings
from django.core.exceptions import MiddlewareNotUsed

logger = logging.getLogger("core.requests")


class RequestLogMiddleware:
    def __init__(self, get_response):
        if not settings.DEBUG:
            raise MiddlewareNotUsed
        self.get_response = get_response

    def __call__(self, request):
        logger.info("%s %s", request.method, request.path)
        return self.get_response(request)
