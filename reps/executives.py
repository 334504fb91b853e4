# reps/executives.py
"""
Who is asking, and which executive's data they may see.

Managers (group ``Manager``) see the whole team and may pick one executive
with ``?exec=``; everybody else is pinned to their own executive name.
"""
from django.conf import settings


def is_manager(u):
    return u.is_authenticated and u.groups.filter(name='Manager').exists()


def executive_for(user):
    profile = getattr(user, 'repprofile', None)
    name = getattr(profile, 'executive_name', '') if profile else ''
    return (name or user.get_username() or '').strip().upper()


def requested_executive(request, param='exec'):
    """Executive filter for this request; None means the whole team."""
    if is_manager(request.user):
        value = (request.GET.get(param) or '').strip()
        return value or None
    return executive_for(request.user)


def configured_executives():
    """[{name, color}] from settings.MEDICALL_EXECUTIVES."""
    rows = []
    for item in getattr(settings, 'MEDICALL_EXECUTIVES', []):
        if isinstance(item, str):
            rows.append({'name': item, 'color': ''})
        else:
            rows.append({'name': item['name'], 'color': item.get('color', '')})
    return rows
