"""
Use Cases (Application Services) do Domínio de Créditos.

Use Cases implementados:
- SolicitarCreditoService: Cria crédito para um cliente existente
- ListarCreditosPorClienteService: Lista créditos de um cliente
- ObterCreditoService: Obtém crédito por código, conferindo o dono

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- Composição com dados do cliente feita aqui, de forma explícita
"""

from datetime import date
from typing import Callable, List, Optional
import uuid

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import (
    EntityNotFoundError,
    IllegalArgumentError,
)
from src.core.clientes.entities import ClienteEntity
from src.core.clientes.ports import ClienteRepository

from .ports import CreditoRepository
from .entities import CreditoEntity, PoliticaCredito
from .dtos import (
    SolicitarCreditoInputDTO,
    CreditoOutputDTO,
    CreditoListItemDTO,
)
from .events import CreditoSolicitadoEvent


class SolicitarCreditoService:
    """
    Use Case: Solicitar um novo crédito.

    Fluxo:
    1. Resolver o cliente (EntityNotFoundError se não existir)
    2. Criar entidade Credito (validações e prazo na entidade)
    3. Persistir via repositório
    4. Disparar evento CreditoSolicitado
    5. Retornar visão detalhada com email e renda do cliente

    Example:
        service = SolicitarCreditoService(
            credito_repo, cliente_repo, uow, politica=PoliticaCredito()
        )
        output = service.execute(SolicitarCreditoInputDTO(
            valor=Decimal("100.0"),
            data_primeira_parcela=date(2026, 12, 17),
            numero_parcelas=15,
            cliente_id=1,
        ))
        print(output.codigo)
    """

    def __init__(
        self,
        credito_repo: CreditoRepository,
        cliente_repo: ClienteRepository,
        uow: UnitOfWork,
        politica: PoliticaCredito,
        hoje: Callable[[], date] = date.today,
    ):
        """
        Args:
            credito_repo: Repositório de créditos
            cliente_repo: Repositório de clientes
            uow: Unit of Work para transação atômica
            politica: Limites de parcelas e prazo
            hoje: Relógio (injetável para testes)
        """
        self.credito_repo = credito_repo
        self.cliente_repo = cliente_repo
        self.uow = uow
        self.politica = politica
        self.hoje = hoje

    def execute(self, input_dto: SolicitarCreditoInputDTO) -> CreditoOutputDTO:
        """
        Raises:
            ValidationError: Se campos inválidos
            EntityNotFoundError: Se o cliente não existe
            BusinessRuleViolationError: Se a primeira parcela exceder o prazo
        """
        with self.uow:
            cliente = self.cliente_repo.get_by_id(input_dto.cliente_id)

            if not cliente:
                raise EntityNotFoundError(
                    f"Cliente {input_dto.cliente_id} não encontrado",
                    entity_type="Cliente",
                    entity_id=str(input_dto.cliente_id),
                )

            credito = CreditoEntity.solicitar(
                valor=input_dto.valor,
                data_primeira_parcela=input_dto.data_primeira_parcela,
                numero_parcelas=input_dto.numero_parcelas,
                cliente_id=cliente.id,
                politica=self.politica,
                hoje=self.hoje(),
            )

            credito = self.credito_repo.save(credito)

            self.uow.publish_event(
                CreditoSolicitadoEvent(
                    aggregate_id=str(credito.codigo),
                    cliente_id=cliente.id,
                    valor=credito.valor,
                    numero_parcelas=credito.numero_parcelas,
                )
            )

        return CreditoOutputDTO.from_entity(credito, cliente)


class ListarCreditosPorClienteService:
    """
    Use Case: Listar créditos de um cliente.

    Não usa UoW (leitura) e não verifica se o cliente existe:
    ID desconhecido resulta em lista vazia.
    """

    def __init__(self, credito_repo: CreditoRepository):
        self.credito_repo = credito_repo

    def execute(self, cliente_id: int) -> List[CreditoListItemDTO]:
        creditos = self.credito_repo.list_by_cliente(cliente_id)
        return [CreditoListItemDTO.from_entity(c) for c in creditos]


class ObterCreditoService:
    """
    Use Case: Obter crédito pelo código.

    O cliente informado deve ser o dono do crédito. Crédito
    inexistente e dono divergente são erros distintos.
    """

    def __init__(
        self,
        credito_repo: CreditoRepository,
        cliente_repo: ClienteRepository,
    ):
        self.credito_repo = credito_repo
        self.cliente_repo = cliente_repo

    def execute(self, codigo: uuid.UUID, cliente_id: int) -> CreditoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se o crédito não existe
            IllegalArgumentError: Se o crédito pertence a outro cliente
        """
        credito = self.credito_repo.get_by_codigo(codigo)

        if not credito:
            raise EntityNotFoundError(
                f"Crédito {codigo} não encontrado",
                entity_type="Credito",
                entity_id=str(codigo),
            )

        if not credito.pertence_a(cliente_id):
            raise IllegalArgumentError(
                "Contate o administrador",
                argument="customerId",
            )

        cliente = self._obter_dono(credito)
        return CreditoOutputDTO.from_entity(credito, cliente)

    def _obter_dono(self, credito: CreditoEntity) -> Optional[ClienteEntity]:
        return self.cliente_repo.get_by_id(credito.cliente_id)
