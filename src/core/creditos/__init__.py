"""
Domínio de Créditos - Solicitação e consulta de empréstimos.

Este módulo contém a lógica de negócio de créditos, incluindo:
- Entidades (CreditoEntity, CreditoStatus, PoliticaCredito)
- Use Cases (SolicitarCredito, ListarCreditosPorCliente, ObterCredito)
- Domain Events (CreditoSolicitado)
- DTOs (visão detalhada e resumida)
- Ports (CreditoRepository)

Características do Domínio:
- Parcelas limitadas por política configurável
- Primeira parcela dentro de um prazo a partir da solicitação
- Consulta por código exige o ID do cliente dono
"""

from .entities import CreditoEntity, CreditoStatus, PoliticaCredito
from .events import CreditoSolicitadoEvent
from .dtos import (
    SolicitarCreditoInputDTO,
    CreditoOutputDTO,
    CreditoListItemDTO,
)
from .ports import CreditoRepository
from .use_cases import (
    SolicitarCreditoService,
    ListarCreditosPorClienteService,
    ObterCreditoService,
)

__all__ = [
    # Entities
    "CreditoEntity",
    "CreditoStatus",
    "PoliticaCredito",
    # Events
    "CreditoSolicitadoEvent",
    # DTOs
    "SolicitarCreditoInputDTO",
    "CreditoOutputDTO",
    "CreditoListItemDTO",
    # Ports
    "CreditoRepository",
    # Use Cases
    "SolicitarCreditoService",
    "ListarCreditosPorClienteService",
    "ObterCreditoService",
]
