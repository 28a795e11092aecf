"""
Domínio de Clientes - Cadastro de quem solicita crédito.

- Entidade ClienteEntity (CPF, email, renda, endereço)
- Use Cases de cadastro, consulta, atualização e remoção
- Port ClienteRepository
"""

from .entities import ClienteEntity
from .events import ClienteCadastradoEvent, ClienteRemovidoEvent
from .dtos import (
    CadastrarClienteInputDTO,
    AtualizarClienteInputDTO,
    ClienteOutputDTO,
)
from .ports import ClienteRepository
from .use_cases import (
    CadastrarClienteService,
    ObterClienteService,
    AtualizarClienteService,
    RemoverClienteService,
)

__all__ = [
    "ClienteEntity",
    "ClienteCadastradoEvent",
    "ClienteRemovidoEvent",
    "CadastrarClienteInputDTO",
    "AtualizarClienteInputDTO",
    "ClienteOutputDTO",
    "ClienteRepository",
    "CadastrarClienteService",
    "ObterClienteService",
    "AtualizarClienteService",
    "RemoverClienteService",
]
