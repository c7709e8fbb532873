# accounts/views.py
import logging

from django.conf import settings
from django.shortcuts import render, redirect
from django.views.decorators.http import require_http_methods, require_POST

from .auth import get_auth_context
from .forms import AdminLoginForm

logger = logging.getLogger(__name__)


@require_http_methods(["GET", "POST"])
def admin_login(request):
    auth = get_auth_context()
    if request.method == 'POST':
        form = AdminLoginForm(request.POST)
        if form.is_valid():
            logger.info("Admin signed in")
            return auth.grant(redirect(settings.LOGIN_REDIRECT_URL))
        # wrong identifier: inline message, plain 200
        return render(request, 'accounts/login.html', {'form': form})

    if auth.is_authorized(request):
        return redirect(settings.LOGIN_REDIRECT_URL)
    return render(request, 'accounts/login.html', {'form': AdminLoginForm()})


@require_POST
def admin_logout(request):
    return get_auth_context().revoke(redirect(settings.LOGOUT_REDIRECT_URL))
