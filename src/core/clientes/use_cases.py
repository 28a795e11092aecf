"""
Use Cases (Application Services) do Domínio de Clientes.

Use Cases implementados:
- CadastrarClienteService: Cadastra novo cliente
- ObterClienteService: Obtém cliente por ID
- AtualizarClienteService: Atualiza campos mutáveis
- RemoverClienteService: Remove cliente (e créditos em cascata)
"""

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import EntityNotFoundError

from .ports import ClienteRepository
from .entities import ClienteEntity
from .dtos import (
    CadastrarClienteInputDTO,
    AtualizarClienteInputDTO,
    ClienteOutputDTO,
)
from .events import ClienteCadastradoEvent, ClienteRemovidoEvent


def _cliente_nao_encontrado(cliente_id: int) -> EntityNotFoundError:
    return EntityNotFoundError(
        f"Cliente {cliente_id} não encontrado",
        entity_type="Cliente",
        entity_id=str(cliente_id),
    )


class CadastrarClienteService:
    """
    Use Case: Cadastrar um novo cliente.

    Fluxo:
    1. Criar entidade (validações na entidade)
    2. Persistir via repositório (ID atribuído pelo armazenamento)
    3. Disparar evento ClienteCadastrado
    4. Retornar DTO de saída
    """

    def __init__(self, cliente_repo: ClienteRepository, uow: UnitOfWork):
        self.cliente_repo = cliente_repo
        self.uow = uow

    def execute(self, input_dto: CadastrarClienteInputDTO) -> ClienteOutputDTO:
        """
        Raises:
            ValidationError: Se dados inválidos
            DataConflictError: Se CPF ou email já cadastrados
        """
        with self.uow:
            cliente = ClienteEntity.cadastrar(
                nome=input_dto.nome,
                sobrenome=input_dto.sobrenome,
                cpf=input_dto.cpf,
                email=input_dto.email,
                renda=input_dto.renda,
                senha=input_dto.senha,
                cep=input_dto.cep,
                rua=input_dto.rua,
            )

            cliente = self.cliente_repo.save(cliente)

            self.uow.publish_event(
                ClienteCadastradoEvent(
                    aggregate_id=str(cliente.id),
                    email=cliente.email,
                )
            )

        return ClienteOutputDTO.from_entity(cliente)


class ObterClienteService:
    """Use Case: Obter cliente por ID."""

    def __init__(self, cliente_repo: ClienteRepository):
        self.cliente_repo = cliente_repo

    def execute(self, cliente_id: int) -> ClienteOutputDTO:
        cliente = self.cliente_repo.get_by_id(cliente_id)

        if not cliente:
            raise _cliente_nao_encontrado(cliente_id)

        return ClienteOutputDTO.from_entity(cliente)


class AtualizarClienteService:
    """Use Case: Atualizar nome, sobrenome, renda e endereço do cliente."""

    def __init__(self, cliente_repo: ClienteRepository, uow: UnitOfWork):
        self.cliente_repo = cliente_repo
        self.uow = uow

    def execute(self, input_dto: AtualizarClienteInputDTO) -> ClienteOutputDTO:
        with self.uow:
            cliente = self.cliente_repo.get_by_id(input_dto.cliente_id)

            if not cliente:
                raise _cliente_nao_encontrado(input_dto.cliente_id)

            cliente.atualizar(
                nome=input_dto.nome,
                sobrenome=input_dto.sobrenome,
                renda=input_dto.renda,
                cep=input_dto.cep,
                rua=input_dto.rua,
            )

            cliente = self.cliente_repo.save(cliente)

        return ClienteOutputDTO.from_entity(cliente)


class RemoverClienteService:
    """Use Case: Remover cliente."""

    def __init__(self, cliente_repo: ClienteRepository, uow: UnitOfWork):
        self.cliente_repo = cliente_repo
        self.uow = uow

    def execute(self, cliente_id: int) -> None:
        with self.uow:
            if not self.cliente_repo.exists(cliente_id):
                raise _cliente_nao_encontrado(cliente_id)

            self.cliente_repo.delete(cliente_id)

            self.uow.publish_event(
                ClienteRemovidoEvent(aggregate_id=str(cliente_id))
            )
