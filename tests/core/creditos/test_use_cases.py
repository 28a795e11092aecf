"""
Testes Unitários para Use Cases do Domínio de Créditos.

Estratégia de Teste:
- Repositórios em memória e InMemoryUnitOfWork
- Relógio fixo injetado no SolicitarCreditoService
- Distinção entre os tipos de erro (campo, regra, não encontrado, posse)
"""

from datetime import date
from decimal import Decimal
import uuid

import pytest

from src.core.creditos.dtos import SolicitarCreditoInputDTO
from src.core.creditos.entities import CreditoStatus, PoliticaCredito
from src.core.creditos.events import CreditoSolicitadoEvent
from src.core.creditos.use_cases import (
    ListarCreditosPorClienteService,
    ObterCreditoService,
    SolicitarCreditoService,
)
from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    IllegalArgumentError,
    ValidationError,
)


@pytest.fixture
def solicitar_service(credito_repo, cliente_repo, uow, hoje):
    return SolicitarCreditoService(
        credito_repo, cliente_repo, uow,
        politica=PoliticaCredito(),
        hoje=lambda: hoje,
    )


def input_dto(cliente_id, **overrides):
    dados = {
        "valor": Decimal("100.0"),
        "data_primeira_parcela": date(2026, 12, 17),
        "numero_parcelas": 15,
        "cliente_id": cliente_id,
    }
    dados.update(overrides)
    return SolicitarCreditoInputDTO(**dados)


class TestSolicitarCreditoService:

    def test_solicitar_retorna_visao_detalhada(self, solicitar_service, cliente, uow):
        output = solicitar_service.execute(input_dto(cliente.id))

        assert output.status == CreditoStatus.IN_PROGRESS.value
        assert output.email_cliente == "camila@email.com"
        assert output.renda_cliente == Decimal("1000.0")
        assert uow.committed
        assert isinstance(uow.published_events[0], CreditoSolicitadoEvent)

    def test_to_dict(self, solicitar_service, cliente):
        data = solicitar_service.execute(input_dto(cliente.id)).to_dict()

        assert data["creditValue"] == 100.0
        assert data["numberOfInstallment"] == 15
        assert data["dayFirstOfInstallment"] == "2026-12-17"
        assert data["status"] == "IN_PROGRESS"
        assert data["emailCustomer"] == "camila@email.com"
        assert data["incomeCustomer"] == 1000.0
        uuid.UUID(data["creditCode"])

    def test_cliente_inexistente(self, solicitar_service, credito_repo, uow):
        with pytest.raises(EntityNotFoundError):
            solicitar_service.execute(input_dto(99))

        assert credito_repo.list_by_cliente(99) == []
        assert uow.rolled_back

    def test_quarenta_e_nove_parcelas(self, solicitar_service, cliente):
        with pytest.raises(ValidationError):
            solicitar_service.execute(input_dto(cliente.id, numero_parcelas=49))

    def test_prazo_excedido_nao_persiste(self, solicitar_service, cliente, credito_repo, uow):
        with pytest.raises(BusinessRuleViolationError):
            solicitar_service.execute(
                input_dto(cliente.id, data_primeira_parcela=date(2027, 2, 17))
            )

        assert credito_repo.list_by_cliente(cliente.id) == []
        assert uow.published_events == []

    def test_politica_injetada_limita_parcelas(
        self, credito_repo, cliente_repo, uow, hoje, cliente
    ):
        service = SolicitarCreditoService(
            credito_repo, cliente_repo, uow,
            politica=PoliticaCredito(max_parcelas=12),
            hoje=lambda: hoje,
        )

        with pytest.raises(ValidationError) as exc_info:
            service.execute(input_dto(cliente.id, numero_parcelas=13))

        assert exc_info.value.field == "numero_parcelas"


class TestListarCreditosPorClienteService:

    def test_lista_creditos_do_cliente(self, solicitar_service, credito_repo, cliente, outro_cliente):
        solicitar_service.execute(input_dto(cliente.id))
        solicitar_service.execute(input_dto(cliente.id, valor=Decimal("250.0")))
        solicitar_service.execute(input_dto(outro_cliente.id))

        itens = ListarCreditosPorClienteService(credito_repo).execute(cliente.id)

        assert [i.valor for i in itens] == [Decimal("100.0"), Decimal("250.0")]
        assert set(itens[0].to_dict()) == {
            "creditCode",
            "creditValue",
            "numberOfInstallments",
            "dayFirstOfInstallment",
        }

    def test_cliente_sem_creditos(self, credito_repo, cliente):
        assert ListarCreditosPorClienteService(credito_repo).execute(cliente.id) == []

    def test_cliente_inexistente_lista_vazia(self, credito_repo):
        assert ListarCreditosPorClienteService(credito_repo).execute(999) == []


class TestObterCreditoService:

    def test_obter_pelo_dono(self, solicitar_service, credito_repo, cliente_repo, cliente):
        criado = solicitar_service.execute(input_dto(cliente.id))

        output = ObterCreditoService(credito_repo, cliente_repo).execute(
            criado.codigo, cliente.id
        )

        assert output.codigo == criado.codigo
        assert output.valor == Decimal("100.0")
        assert output.numero_parcelas == 15
        assert output.email_cliente == "camila@email.com"

    def test_codigo_inexistente(self, credito_repo, cliente_repo, cliente):
        with pytest.raises(EntityNotFoundError):
            ObterCreditoService(credito_repo, cliente_repo).execute(
                uuid.uuid4(), cliente.id
            )

    def test_outro_cliente_nao_e_dono(
        self, solicitar_service, credito_repo, cliente_repo, cliente, outro_cliente
    ):
        criado = solicitar_service.execute(input_dto(cliente.id))

        with pytest.raises(IllegalArgumentError) as exc_info:
            ObterCreditoService(credito_repo, cliente_repo).execute(
                criado.codigo, outro_cliente.id
            )

        assert not isinstance(exc_info.value, EntityNotFoundError)
        assert exc_info.value.message == "Contate o administrador"
