"""Domain Events do domínio de Créditos."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from src.core.shared.events import DomainEvent


@dataclass
class CreditoSolicitadoEvent(DomainEvent):
    """Disparado quando um cliente solicita um novo crédito."""

    cliente_id: Optional[int] = None
    valor: Decimal = field(default=Decimal("0"))
    numero_parcelas: int = 0

    @property
    def aggregate_type(self) -> str:
        return "Credito"
