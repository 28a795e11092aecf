"""
Data Transfer Objects (DTOs) do Domínio de Créditos.

Tipos de DTOs:
- Input DTO: dados de solicitação já validados pelo Form
- CreditoOutputDTO: visão detalhada, com email e renda do dono
- CreditoListItemDTO: visão resumida para listagens

A composição com os dados do cliente é explícita: o Use Case
busca o cliente e o entrega ao from_entity, sem navegação lazy.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional
import uuid

from src.core.clientes.entities import ClienteEntity

from .entities import CreditoEntity


@dataclass(frozen=True)
class SolicitarCreditoInputDTO:
    """
    DTO de entrada para solicitar crédito.

    Attributes:
        valor: Valor do crédito
        data_primeira_parcela: Vencimento da primeira parcela
        numero_parcelas: Quantidade de parcelas
        cliente_id: ID do cliente solicitante
    """

    valor: Decimal
    data_primeira_parcela: date
    numero_parcelas: int
    cliente_id: int


@dataclass
class CreditoOutputDTO:
    """DTO de saída completo de um crédito."""

    codigo: uuid.UUID
    valor: Decimal
    numero_parcelas: int
    data_primeira_parcela: date
    status: str
    email_cliente: Optional[str]
    renda_cliente: Optional[Decimal]

    @classmethod
    def from_entity(
        cls,
        entity: CreditoEntity,
        cliente: Optional[ClienteEntity] = None,
    ) -> "CreditoOutputDTO":
        """
        Compõe a visão detalhada a partir do crédito e do seu dono.

        Args:
            entity: Crédito
            cliente: Dono do crédito, já carregado pelo Use Case
        """
        return cls(
            codigo=entity.codigo,
            valor=entity.valor,
            numero_parcelas=entity.numero_parcelas,
            data_primeira_parcela=entity.data_primeira_parcela,
            status=entity.status.value,
            email_cliente=cliente.email if cliente else None,
            renda_cliente=cliente.renda if cliente else None,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "creditCode": str(self.codigo),
            "creditValue": float(self.valor),
            "numberOfInstallment": self.numero_parcelas,
            "dayFirstOfInstallment": self.data_primeira_parcela.isoformat(),
            "status": self.status,
            "emailCustomer": self.email_cliente,
            "incomeCustomer": (
                float(self.renda_cliente) if self.renda_cliente is not None else None
            ),
        }


@dataclass
class CreditoListItemDTO:
    """DTO resumido para listagem de créditos de um cliente."""

    codigo: uuid.UUID
    valor: Decimal
    numero_parcelas: int
    data_primeira_parcela: date

    @classmethod
    def from_entity(cls, entity: CreditoEntity) -> "CreditoListItemDTO":
        return cls(
            codigo=entity.codigo,
            valor=entity.valor,
            numero_parcelas=entity.numero_parcelas,
            data_primeira_parcela=entity.data_primeira_parcela,
        )

    def to_dict(self) -> dict:
        return {
            "creditCode": str(self.codigo),
            "creditValue": float(self.valor),
            "numberOfInstallments": self.numero_parcelas,
            "dayFirstOfInstallment": self.data_primeira_parcela.isoformat(),
        }
