"""
Ports (Interfaces) do Domínio de Créditos.

Princípio:
    Core define interfaces → Adapters implementam
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable
import uuid

from .entities import CreditoEntity


@runtime_checkable
class CreditoRepository(Protocol):
    """
    Interface para persistência de Créditos.

    Implementações:
    - DjangoCreditoRepository (ORM)
    - InMemoryCreditoRepository (para testes)
    """

    def save(self, credito: CreditoEntity) -> CreditoEntity:
        """Persiste crédito (create ou update)."""
        ...

    def get_by_codigo(self, codigo: uuid.UUID) -> Optional[CreditoEntity]:
        """Busca crédito pelo código; None se não existir."""
        ...

    def list_by_cliente(self, cliente_id: int) -> List[CreditoEntity]:
        """
        Lista créditos de um cliente.

        Não verifica a existência do cliente: ID desconhecido
        resulta em lista vazia.
        """
        ...


class InMemoryCreditoRepository:
    """Implementação em memória do CreditoRepository, para testes."""

    def __init__(self):
        self._creditos: Dict[uuid.UUID, CreditoEntity] = {}

    def save(self, credito: CreditoEntity) -> CreditoEntity:
        self._creditos[credito.codigo] = credito
        return credito

    def get_by_codigo(self, codigo: uuid.UUID) -> Optional[CreditoEntity]:
        return self._creditos.get(codigo)

    def list_by_cliente(self, cliente_id: int) -> List[CreditoEntity]:
        return [c for c in self._creditos.values() if c.cliente_id == cliente_id]
