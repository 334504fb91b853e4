# medicall/http.py
"""Request/response helpers shared by the JSON endpoints."""
import json

from django.http import JsonResponse


def read_payload(request):
    """JSON body when sent as application/json, form fields otherwise."""
    if (request.content_type or '').startswith('application/json'):
        try:
            return json.loads(request.body.decode('utf-8') or 'null')
        except (ValueError, UnicodeDecodeError):
            return None
    return request.POST.dict()


def validation_error(exc, status=400):
    messages = exc.messages if hasattr(exc, 'messages') else [str(exc)]
    return JsonResponse({'ok': False, 'error': ' '.join(messages)}, status=status)


def not_found(exc):
    payload = exc.to_dict() if hasattr(exc, 'to_dict') else {'detail': str(exc)}
    payload['ok'] = False
    return JsonResponse(payload, status=404)


def flag(value):
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')
