"""
Entidades do Domínio de Créditos.

Entidades:
- CreditoEntity: Empréstimo solicitado por um cliente
- CreditoStatus: Estados possíveis de um crédito
- PoliticaCredito: Limites configuráveis da solicitação

Regras de Negócio Encapsuladas:
- Código aleatório (UUID) gerado na criação
- Número de parcelas no intervalo [1, max_parcelas]
- Primeira parcela no futuro (validação de campo)
- Primeira parcela antes de hoje + prazo_meses (regra de negócio)
- Crédito pertence a exatamente um cliente, fixado na criação
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional
import uuid

from src.core.shared.exceptions import (
    ValidationError,
    BusinessRuleViolationError,
)
from src.core.shared import validators


class CreditoStatus(Enum):
    """
    Estados possíveis de um crédito.

    Todo crédito nasce IN_PROGRESS; APPROVED e REJECT são
    decisões posteriores, fora do fluxo de solicitação.
    """

    IN_PROGRESS = "IN_PROGRESS"
    APPROVED = "APPROVED"
    REJECT = "REJECT"


@dataclass(frozen=True)
class PoliticaCredito:
    """
    Limites da solicitação de crédito.

    Attributes:
        min_parcelas: Menor número de parcelas aceito
        max_parcelas: Maior número de parcelas aceito
        prazo_meses: Meses a partir de hoje dentro dos quais
            a primeira parcela deve vencer (limite exclusivo)
    """

    min_parcelas: int = 1
    max_parcelas: int = 48
    prazo_meses: int = 3


@dataclass
class CreditoEntity:
    """
    Entidade de Domínio: Crédito.

    Attributes:
        codigo: UUID aleatório, identificador externo
        valor: Valor do crédito
        data_primeira_parcela: Vencimento da primeira parcela
        numero_parcelas: Quantidade de parcelas
        status: Estado atual
        cliente_id: ID do cliente dono (imutável)

    Example:
        credito = CreditoEntity.solicitar(
            valor=Decimal("100.0"),
            data_primeira_parcela=date(2026, 12, 17),
            numero_parcelas=15,
            cliente_id=1,
        )
    """

    codigo: uuid.UUID = field(default_factory=uuid.uuid4)
    valor: Decimal = Decimal("0")
    data_primeira_parcela: Optional[date] = None
    numero_parcelas: int = 0
    status: CreditoStatus = field(default=CreditoStatus.IN_PROGRESS)
    cliente_id: Optional[int] = None

    @classmethod
    def solicitar(
        cls,
        valor: Decimal,
        data_primeira_parcela: date,
        numero_parcelas: int,
        cliente_id: int,
        politica: Optional[PoliticaCredito] = None,
        hoje: Optional[date] = None,
    ) -> "CreditoEntity":
        """
        Factory method para solicitar crédito com validações.

        Args:
            valor: Valor do crédito (>= 0)
            data_primeira_parcela: Data futura, antes de hoje + prazo
            numero_parcelas: Entre politica.min_parcelas e politica.max_parcelas
            cliente_id: ID do cliente dono
            politica: Limites aplicados (default: PoliticaCredito())
            hoje: Data de referência (default: date.today())

        Raises:
            ValidationError: Se algum campo for inválido
            BusinessRuleViolationError: Se a primeira parcela exceder o prazo
        """
        politica = politica or PoliticaCredito()
        hoje = hoje or date.today()

        if not validators.decimal_nao_negativo(valor):
            raise ValidationError(
                "Valor do crédito deve ser não negativo",
                field="valor"
            )

        if not validators.dentro_do_intervalo(
            numero_parcelas, politica.min_parcelas, politica.max_parcelas
        ):
            raise ValidationError(
                f"Número de parcelas deve estar entre "
                f"{politica.min_parcelas} e {politica.max_parcelas}",
                field="numero_parcelas"
            )

        if cliente_id is None:
            raise ValidationError("Cliente é obrigatório", field="cliente_id")

        if data_primeira_parcela is None or not validators.data_futura(
            data_primeira_parcela, hoje
        ):
            raise ValidationError(
                "Data da primeira parcela deve ser futura",
                field="data_primeira_parcela"
            )

        cls._validar_prazo_primeira_parcela(data_primeira_parcela, politica, hoje)

        return cls(
            valor=Decimal(str(valor)),
            data_primeira_parcela=data_primeira_parcela,
            numero_parcelas=numero_parcelas,
            status=CreditoStatus.IN_PROGRESS,
            cliente_id=cliente_id,
        )

    @staticmethod
    def _validar_prazo_primeira_parcela(
        data_primeira_parcela: date,
        politica: PoliticaCredito,
        hoje: date,
    ) -> None:
        if not validators.dentro_do_prazo(
            data_primeira_parcela, politica.prazo_meses, hoje
        ):
            raise BusinessRuleViolationError(
                f"Data da primeira parcela inválida: deve ser anterior a "
                f"{validators.somar_meses(hoje, politica.prazo_meses).isoformat()}",
                rule="prazo_primeira_parcela"
            )

    def pertence_a(self, cliente_id: int) -> bool:
        """Verifica se o crédito é do cliente informado."""
        return self.cliente_id == cliente_id

    def __repr__(self) -> str:
        return (
            f"CreditoEntity("
            f"codigo={str(self.codigo)[:8]}..., "
            f"valor={self.valor}, "
            f"status={self.status.value}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por código (identidade de entidade)."""
        if not isinstance(other, CreditoEntity):
            return False
        return self.codigo == other.codigo

    def __hash__(self) -> int:
        return hash(self.codigo)
