"""
API Views JSON para o domínio de Créditos.

Endpoints:
- POST /api/credits - Solicitar crédito
- GET /api/credits?customerId=<id> - Listar créditos do cliente
- GET /api/credits/<creditCode>?customerId=<id> - Obter crédito

Formato:
- Entrada: JSON com chaves camelCase
- Saída: visão detalhada, lista resumida ou envelope de erro
"""

import logging
import uuid

from django.http import HttpRequest, JsonResponse

from src.core.creditos.dtos import SolicitarCreditoInputDTO
from src.core.shared.exceptions import ValidationError

from ..shared.api import BaseAPIView, json_response, parse_int_param, validar_form
from .forms import CAMPOS_SOLICITACAO, CreditoForm

logger = logging.getLogger(__name__)


def parse_codigo(codigo: str) -> uuid.UUID:
    """
    Converte o código do path em UUID.

    Raises:
        ValidationError: Se o código não for um UUID válido
    """
    try:
        return uuid.UUID(codigo)
    except ValueError:
        raise ValidationError("Código de crédito inválido", field="creditCode")


class CreditoAPIListView(BaseAPIView):
    """
    POST /api/credits - Solicita crédito
    GET /api/credits?customerId=<id> - Lista créditos do cliente
    """

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Solicita novo crédito.

        Body JSON:
        {
            "creditValue": number,
            "dayFirstOfInstallment": "AAAA-MM-DD",
            "numberOfInstallments": int,
            "customerId": int
        }
        """
        try:
            data = validar_form(
                CreditoForm, self.parse_body(request), CAMPOS_SOLICITACAO
            )

            solicitar_service = self.get_service('solicitar_credito_service')
            output = solicitar_service.execute(SolicitarCreditoInputDTO(**data))

            logger.info(
                f"API: Crédito {output.codigo} solicitado "
                f"pelo cliente {data['cliente_id']}"
            )

            return json_response(output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)

    def get(self, request: HttpRequest) -> JsonResponse:
        """Lista créditos do cliente (lista vazia se não houver)."""
        try:
            cliente_id = parse_int_param(request, 'customerId')

            listar_service = self.get_service('listar_creditos_service')
            creditos = listar_service.execute(cliente_id)

            return json_response([c.to_dict() for c in creditos])

        except Exception as e:
            return self.handle_exception(e)


class CreditoAPIDetailView(BaseAPIView):
    """
    GET /api/credits/<creditCode>?customerId=<id> - Obter crédito
    """

    def get(self, request: HttpRequest, codigo: str) -> JsonResponse:
        try:
            credito_codigo = parse_codigo(codigo)
            cliente_id = parse_int_param(request, 'customerId')

            obter_service = self.get_service('obter_credito_service')
            output = obter_service.execute(credito_codigo, cliente_id)

            return json_response(output.to_dict())

        except Exception as e:
            return self.handle_exception(e)
