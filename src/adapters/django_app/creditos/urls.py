"""
URL patterns para o domínio de Créditos.

Endpoints API JSON:
- POST /api/credits - Solicitar crédito
- GET /api/credits?customerId=<id> - Listar créditos do cliente
- GET /api/credits/<creditCode>?customerId=<id> - Obter crédito
"""

from django.urls import path

from . import api_views

app_name = 'creditos'

urlpatterns = [
    path('', api_views.CreditoAPIListView.as_view(), name='api_list'),
    path('/<str:codigo>', api_views.CreditoAPIDetailView.as_view(), name='api_detail'),
]
