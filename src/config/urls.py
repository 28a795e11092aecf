"""
URL Configuration para o Credit Application System.

Estrutura:
- /admin/ - Django Admin
- /api/customers - API de Clientes
- /api/credits - API de Créditos
- /health/ - Health check
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # API
    path('api/customers', include('src.adapters.django_app.clientes.urls')),
    path('api/credits', include('src.adapters.django_app.creditos.urls')),

    # Health check
    path('health/', health, name='health'),
]
