"""
Ports (Interfaces) do Domínio de Clientes.

Define o contrato de persistência que os Adapters implementam.
"""

from typing import Dict, Optional, Protocol, runtime_checkable

from src.core.shared.exceptions import DataConflictError

from .entities import ClienteEntity


@runtime_checkable
class ClienteRepository(Protocol):
    """
    Interface para persistência de Clientes.

    Implementações:
    - DjangoClienteRepository (ORM)
    - InMemoryClienteRepository (para testes)
    """

    def save(self, cliente: ClienteEntity) -> ClienteEntity:
        """
        Persiste cliente (create ou update).

        Returns:
            Entidade com o ID atribuído pelo armazenamento

        Raises:
            DataConflictError: Se CPF ou email já cadastrados
        """
        ...

    def get_by_id(self, cliente_id: int) -> Optional[ClienteEntity]:
        """Busca cliente por ID; None se não existir."""
        ...

    def delete(self, cliente_id: int) -> None:
        """Remove cliente e, em cascata, seus créditos."""
        ...

    def exists(self, cliente_id: int) -> bool:
        ...


class InMemoryClienteRepository:
    """
    Implementação em memória do ClienteRepository.

    Útil para testes unitários. IDs são sequenciais, como
    numa coluna auto-incremento.
    """

    def __init__(self):
        self._clientes: Dict[int, ClienteEntity] = {}
        self._proximo_id = 1

    def save(self, cliente: ClienteEntity) -> ClienteEntity:
        for existente in self._clientes.values():
            if existente.id == cliente.id:
                continue
            if existente.cpf == cliente.cpf or existente.email == cliente.email:
                raise DataConflictError("CPF ou email já cadastrado")

        if cliente.id is None:
            cliente.id = self._proximo_id
            self._proximo_id += 1
        self._clientes[cliente.id] = cliente
        return cliente

    def get_by_id(self, cliente_id: int) -> Optional[ClienteEntity]:
        return self._clientes.get(cliente_id)

    def delete(self, cliente_id: int) -> None:
        self._clientes.pop(cliente_id, None)

    def exists(self, cliente_id: int) -> bool:
        return cliente_id in self._clientes
