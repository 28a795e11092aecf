"""
Configurações globais do Pytest para o Credit Application System.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures compartilhadas pelos testes do Core.
"""

from datetime import date
from decimal import Decimal

import pytest

from src.core.clientes.entities import ClienteEntity
from src.core.clientes.ports import InMemoryClienteRepository
from src.core.creditos.ports import InMemoryCreditoRepository
from src.adapters.django_app.shared.unit_of_work import InMemoryUnitOfWork

# CPFs com dígitos verificadores válidos
CPF_CAMI = "28475934625"
CPF_OUTRO = "52998224725"

HOJE = date(2026, 10, 17)


@pytest.fixture
def hoje():
    """Data de referência fixa para regras de prazo."""
    return HOJE


@pytest.fixture
def cliente_repo():
    """Repositório de clientes em memória."""
    return InMemoryClienteRepository()


@pytest.fixture
def credito_repo():
    """Repositório de créditos em memória."""
    return InMemoryCreditoRepository()


@pytest.fixture
def uow():
    """Unit of Work em memória."""
    return InMemoryUnitOfWork()


def _dados_cliente(**overrides) -> dict:
    dados = {
        "nome": "Cami",
        "sobrenome": "Cavalcante",
        "cpf": CPF_CAMI,
        "email": "camila@email.com",
        "renda": Decimal("1000.0"),
        "senha": "1234",
        "cep": "000000",
        "rua": "Rua da Cami, 123",
    }
    dados.update(overrides)
    return dados


@pytest.fixture
def dados_cliente():
    """Factory de dados válidos de cadastro (campos sobrescrevíveis)."""
    return _dados_cliente


@pytest.fixture
def cliente(cliente_repo):
    """Cliente já persistido no repositório em memória."""
    return cliente_repo.save(ClienteEntity.cadastrar(**_dados_cliente()))


@pytest.fixture
def outro_cliente(cliente_repo):
    """Segundo cliente, para cenários de dono divergente."""
    return cliente_repo.save(
        ClienteEntity.cadastrar(**_dados_cliente(
            nome="Joao",
            sobrenome="Silva",
            cpf=CPF_OUTRO,
            email="joao@email.com",
        ))
    )
