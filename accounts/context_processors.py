# accounts/context_processors.py
from .auth import is_admin_request


def admin_marker(request):
    """Expose is_admin so the layout can switch between public and admin nav."""
    return {'is_admin': is_admin_request(request)}
