"""
Data Transfer Objects (DTOs) do Domínio de Clientes.

Input DTOs recebem dados já validados pelos Forms; o Output DTO
define o contrato JSON da API (camelCase), sem expor a senha.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .entities import ClienteEntity


@dataclass(frozen=True)
class CadastrarClienteInputDTO:
    """DTO de entrada para cadastro de cliente."""

    nome: str
    sobrenome: str
    cpf: str
    email: str
    renda: Decimal
    senha: str
    cep: str
    rua: str


@dataclass(frozen=True)
class AtualizarClienteInputDTO:
    """DTO de entrada para atualização parcial do cliente."""

    cliente_id: int
    nome: str
    sobrenome: str
    renda: Decimal
    cep: str
    rua: str


@dataclass
class ClienteOutputDTO:
    """DTO de saída com os dados públicos do cliente."""

    id: Optional[int]
    nome: str
    sobrenome: str
    cpf: str
    email: str
    renda: Decimal
    cep: str
    rua: str

    @classmethod
    def from_entity(cls, entity: ClienteEntity) -> "ClienteOutputDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            sobrenome=entity.sobrenome,
            cpf=entity.cpf,
            email=entity.email,
            renda=entity.renda,
            cep=entity.cep,
            rua=entity.rua,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "firstName": self.nome,
            "lastName": self.sobrenome,
            "cpf": self.cpf,
            "email": self.email,
            "income": float(self.renda),
            "zipCode": self.cep,
            "street": self.rua,
        }
