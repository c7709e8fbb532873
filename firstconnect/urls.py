# firstconnect/urls.py
from django.urls import path, include
from django.views.generic import TemplateView

from .routing import slash_optional

urlpatterns = [
    # Home & contact
    path('', TemplateView.as_view(template_name='home.html'), name='home'),
    *slash_optional('contact/', TemplateView.as_view(template_name='contact.html'), name='contact'),

    # Admin login/logout
    path('admin/', include('accounts.urls', namespace='accounts')),

    # Job board, applications and admin dashboards
    path('', include('jobs.urls', namespace='jobs')),
]
