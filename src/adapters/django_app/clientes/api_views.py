"""
API Views JSON para o domínio de Clientes.

Endpoints:
- POST /api/customers - Cadastrar cliente
- PATCH /api/customers?customerId=<id> - Atualizar cliente
- GET /api/customers/<id> - Obter cliente
- DELETE /api/customers/<id> - Remover cliente

Formato:
- Entrada: JSON com chaves camelCase
- Saída: visão do cliente (sem senha) ou envelope de erro
"""

import logging

from django.http import HttpRequest, HttpResponse, JsonResponse

from src.core.clientes.dtos import (
    AtualizarClienteInputDTO,
    CadastrarClienteInputDTO,
)

from ..shared.api import (
    BaseAPIView,
    json_response,
    parse_int_param,
    validar_form,
    validar_id,
)
from .forms import (
    CAMPOS_ATUALIZACAO,
    CAMPOS_CADASTRO,
    ClienteForm,
    ClienteUpdateForm,
)

logger = logging.getLogger(__name__)


class ClienteAPIListView(BaseAPIView):
    """
    POST /api/customers - Cadastra cliente
    PATCH /api/customers?customerId=<id> - Atualiza cliente
    """

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cadastra novo cliente.

        Body JSON:
        {
            "firstName": "string",
            "lastName": "string",
            "cpf": "string (11 dígitos ou XXX.XXX.XXX-XX)",
            "email": "string",
            "income": number,
            "password": "string",
            "zipCode": "string",
            "street": "string"
        }
        """
        try:
            data = validar_form(ClienteForm, self.parse_body(request), CAMPOS_CADASTRO)

            cadastrar_service = self.get_service('cadastrar_cliente_service')
            output = cadastrar_service.execute(CadastrarClienteInputDTO(**data))

            logger.info(f"API: Cliente cadastrado: {output.id}")

            return json_response(output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)

    def patch(self, request: HttpRequest) -> JsonResponse:
        """
        Atualiza nome, renda e endereço do cliente.

        Body JSON:
        {
            "firstName": "string",
            "lastName": "string",
            "income": number,
            "zipCode": "string",
            "street": "string"
        }
        """
        try:
            cliente_id = parse_int_param(request, 'customerId')
            data = validar_form(
                ClienteUpdateForm, self.parse_body(request), CAMPOS_ATUALIZACAO
            )

            atualizar_service = self.get_service('atualizar_cliente_service')
            output = atualizar_service.execute(
                AtualizarClienteInputDTO(cliente_id=cliente_id, **data)
            )

            logger.info(f"API: Cliente atualizado: {cliente_id}")

            return json_response(output.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class ClienteAPIDetailView(BaseAPIView):
    """
    GET /api/customers/<id> - Obter cliente
    DELETE /api/customers/<id> - Remover cliente
    """

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            validar_id(pk, 'id')
            obter_service = self.get_service('obter_cliente_service')
            return json_response(obter_service.execute(pk).to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int) -> HttpResponse:
        try:
            validar_id(pk, 'id')
            remover_service = self.get_service('remover_cliente_service')
            remover_service.execute(pk)

            logger.info(f"API: Cliente removido: {pk}")

            return HttpResponse(status=204)

        except Exception as e:
            return self.handle_exception(e)
