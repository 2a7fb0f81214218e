import logging

from django.contrib.auth import get_user_model
from django.db import DatabaseError, connections
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def healthz(request):
    try:
        with connections['default'].cursor() as c:
            c.execute('SELECT 1')
            row = c.fetchone()
        users = get_user_model().objects.count()
    except DatabaseError as e:
        logger.error('health check failed err=%s', e)
        return JsonResponse({'ok': False, 'error': str(e)}, status=500)
    return JsonResponse({'ok': True, 'db': bool(row and row[0] == 1), 'users': users})
