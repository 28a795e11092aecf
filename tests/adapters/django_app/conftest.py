"""
Fixtures para os testes dos adapters Django.

Usa o settings real (src.config.settings, via pytest-django),
com banco SQLite de teste criado pelas migrations.
"""

from datetime import date
from decimal import Decimal
import json

import pytest
from django.test import Client

from src.adapters.django_app.clientes.models import ClienteModel
from src.config.container import reset_container
from src.core.shared.validators import somar_meses


@pytest.fixture(autouse=True)
def container_limpo():
    """Cada teste usa um container novo."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def api_client():
    return Client()


@pytest.fixture
def post_json(api_client):
    """POST com corpo JSON."""
    def _post(url, payload):
        return api_client.post(url, data=json.dumps(payload), content_type="application/json")
    return _post


@pytest.fixture
def patch_json(api_client):
    """PATCH com corpo JSON."""
    def _patch(url, payload):
        return api_client.patch(url, data=json.dumps(payload), content_type="application/json")
    return _patch


@pytest.fixture
def daqui_a():
    """Data a N meses de hoje."""
    def _daqui_a(meses: int) -> date:
        return somar_meses(date.today(), meses)
    return _daqui_a


@pytest.fixture
def cliente_model_factory():
    """Factory para criar ClienteModel direto no banco."""
    def create_cliente(**kwargs):
        defaults = {
            'nome': 'Cami',
            'sobrenome': 'Cavalcante',
            'cpf': '28475934625',
            'email': 'camila@email.com',
            'renda': Decimal('1000.00'),
            'senha': '1234',
            'cep': '000000',
            'rua': 'Rua da Cami, 123',
        }
        defaults.update(kwargs)
        return ClienteModel.objects.create(**defaults)

    return create_cliente


@pytest.fixture
def cliente_model(db, cliente_model_factory):
    return cliente_model_factory()


@pytest.fixture
def outro_cliente_model(db, cliente_model_factory):
    return cliente_model_factory(
        nome='Joao',
        sobrenome='Silva',
        cpf='52998224725',
        email='joao@email.com',
    )


@pytest.fixture
def credito_payload(daqui_a):
    """Payload válido de solicitação de crédito."""
    def _payload(cliente_id, **overrides):
        payload = {
            'creditValue': 100.0,
            'dayFirstOfInstallment': daqui_a(2).isoformat(),
            'numberOfInstallments': 15,
            'customerId': cliente_id,
        }
        payload.update(overrides)
        return payload
    return _payload
