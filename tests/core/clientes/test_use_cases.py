"""
Testes Unitários para Use Cases do Domínio de Clientes.

Estratégia de Teste:
- Usa InMemoryClienteRepository (fake) para isolamento
- Usa InMemoryUnitOfWork para verificar commit/rollback
- Verifica eventos publicados
"""

from decimal import Decimal

import pytest

from src.core.clientes.dtos import (
    AtualizarClienteInputDTO,
    CadastrarClienteInputDTO,
)
from src.core.clientes.events import ClienteCadastradoEvent, ClienteRemovidoEvent
from src.core.clientes.use_cases import (
    AtualizarClienteService,
    CadastrarClienteService,
    ObterClienteService,
    RemoverClienteService,
)
from src.core.shared.exceptions import (
    DataConflictError,
    EntityNotFoundError,
    ValidationError,
)


class TestCadastrarClienteService:

    def test_cadastrar_atribui_id_e_publica_evento(self, cliente_repo, uow, dados_cliente):
        service = CadastrarClienteService(cliente_repo, uow)

        output = service.execute(CadastrarClienteInputDTO(**dados_cliente()))

        assert output.id == 1
        assert cliente_repo.exists(1)
        assert uow.committed
        assert len(uow.published_events) == 1
        assert isinstance(uow.published_events[0], ClienteCadastradoEvent)

    def test_visao_do_cliente_sem_senha(self, cliente_repo, uow, dados_cliente):
        output = CadastrarClienteService(cliente_repo, uow).execute(
            CadastrarClienteInputDTO(**dados_cliente())
        )

        assert output.to_dict() == {
            "id": 1,
            "firstName": "Cami",
            "lastName": "Cavalcante",
            "cpf": "28475934625",
            "email": "camila@email.com",
            "income": 1000.0,
            "zipCode": "000000",
            "street": "Rua da Cami, 123",
        }

    def test_cpf_duplicado_gera_conflito(self, cliente_repo, uow, cliente, dados_cliente):
        service = CadastrarClienteService(cliente_repo, uow)

        with pytest.raises(DataConflictError):
            service.execute(CadastrarClienteInputDTO(
                **dados_cliente(email="outro@email.com")
            ))

        assert uow.rolled_back
        assert uow.published_events == []

    def test_dados_invalidos(self, cliente_repo, uow, dados_cliente):
        service = CadastrarClienteService(cliente_repo, uow)

        with pytest.raises(ValidationError):
            service.execute(CadastrarClienteInputDTO(**dados_cliente(cpf="123")))

        assert not cliente_repo.exists(1)


class TestObterClienteService:

    def test_obter_existente(self, cliente_repo, cliente):
        output = ObterClienteService(cliente_repo).execute(cliente.id)

        assert output.email == "camila@email.com"

    def test_obter_inexistente(self, cliente_repo):
        with pytest.raises(EntityNotFoundError):
            ObterClienteService(cliente_repo).execute(99)


class TestAtualizarClienteService:

    def test_atualizar(self, cliente_repo, uow, cliente):
        service = AtualizarClienteService(cliente_repo, uow)

        output = service.execute(AtualizarClienteInputDTO(
            cliente_id=cliente.id,
            nome="Camila",
            sobrenome="Souza",
            renda=Decimal("5000.0"),
            cep="45656",
            rua="Rua Updated",
        ))

        assert output.nome == "Camila"
        assert cliente_repo.get_by_id(cliente.id).renda == Decimal("5000.0")
        assert uow.committed

    def test_atualizar_inexistente(self, cliente_repo, uow):
        service = AtualizarClienteService(cliente_repo, uow)

        with pytest.raises(EntityNotFoundError):
            service.execute(AtualizarClienteInputDTO(
                cliente_id=42,
                nome="X",
                sobrenome="Y",
                renda=Decimal("1"),
                cep="1",
                rua="R",
            ))

        assert uow.rolled_back


class TestRemoverClienteService:

    def test_remover(self, cliente_repo, uow, cliente):
        RemoverClienteService(cliente_repo, uow).execute(cliente.id)

        assert not cliente_repo.exists(cliente.id)
        assert isinstance(uow.published_events[0], ClienteRemovidoEvent)

    def test_remover_inexistente(self, cliente_repo, uow):
        with pytest.raises(EntityNotFoundError):
            RemoverClienteService(cliente_repo, uow).execute(99)
