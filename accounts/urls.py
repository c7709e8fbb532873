# accounts/urls.py
from firstconnect.routing import slash_optional
from . import views

app_name = 'accounts'

urlpatterns = [
    *slash_optional('login/', views.admin_login, name='login'),
    *slash_optional('logout/', views.admin_logout, name='logout'),
]
