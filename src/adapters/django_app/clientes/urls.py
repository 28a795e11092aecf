"""
URL patterns para o domínio de Clientes.

Endpoints API JSON:
- POST /api/customers - Cadastrar cliente
- PATCH /api/customers?customerId=<id> - Atualizar cliente
- GET /api/customers/<id> - Obter cliente
- DELETE /api/customers/<id> - Remover cliente
"""

from django.urls import path

from . import api_views

app_name = 'clientes'

urlpatterns = [
    path('', api_views.ClienteAPIListView.as_view(), name='api_list'),
    path('/<int:pk>', api_views.ClienteAPIDetailView.as_view(), name='api_detail'),
]
