from django.conf import settings
from django.shortcuts import redirect
from functools import wraps

from .auth import is_admin_request


def admin_required(view_func):
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not is_admin_request(request):
            return redirect(settings.LOGIN_URL)
        return view_func(request, *args, **kwargs)
    return _wrapped
