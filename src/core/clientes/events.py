"""Domain Events do domínio de Clientes."""

from dataclasses import dataclass

from src.core.shared.events import DomainEvent


@dataclass
class ClienteCadastradoEvent(DomainEvent):
    """Disparado quando um novo cliente é cadastrado."""

    email: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Cliente"


@dataclass
class ClienteRemovidoEvent(DomainEvent):
    """Disparado quando um cliente (e seus créditos) é removido."""

    @property
    def aggregate_type(self) -> str:
        return "Cliente"
