"""
Infraestrutura comum das API Views JSON.

Fornece:
- BaseAPIView: parsing de JSON, acesso ao container DI e
  conversão de exceções em respostas HTTP
- error_response: envelope de erro padronizado
- validar_form: executa um Django Form e converte erros
  em ValidationError com os nomes de campo do JSON

Envelope de erro:
    {
        "title": "Bad Request! Consult the documentation",
        "timestamp": "2026-10-17T10:00:00",
        "status": 400,
        "exception": "src.core.shared.exceptions.ValidationError",
        "details": [{"error": ..., "message": ..., "field": ...}]
    }
"""

import json
import logging
from typing import Any, Dict, Mapping, Type

from django import forms
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from src.core.shared.exceptions import (
    DataConflictError,
    DomainException,
    ValidationError,
)
from src.config.container import get_container

logger = logging.getLogger(__name__)

TITULOS = {
    400: "Bad Request! Consult the documentation",
    409: "Conflict! Consult the documentation",
    500: "Internal Server Error! Consult the documentation",
}

# Faixa de uma chave BigAutoField (BIGINT com sinal)
ID_MIN = 1
ID_MAX = 2**63 - 1


# =============================================================================
# Helpers
# =============================================================================

def json_response(data: Any, status: int = 200) -> JsonResponse:
    """Cria resposta JSON (listas permitidas no topo)."""
    return JsonResponse(data, status=status, safe=False)


def error_response(exc: Exception, status: int) -> JsonResponse:
    """
    Monta o envelope de erro para uma exceção.

    Args:
        exc: Exceção capturada na view
        status: HTTP status code

    Returns:
        JsonResponse com o envelope
    """
    if isinstance(exc, DomainException):
        details = exc.details()
    else:
        details = [{"error": "INTERNAL_ERROR", "message": "Erro interno do servidor"}]

    exc_class = exc.__class__
    body = {
        "title": TITULOS.get(status, TITULOS[400]),
        "timestamp": timezone.now().isoformat(),
        "status": status,
        "exception": f"{exc_class.__module__}.{exc_class.__qualname__}",
        "details": details,
    }
    return JsonResponse(body, status=status)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValidationError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError(f"JSON inválido: {e}", field="body")

    if not isinstance(data, dict):
        raise ValidationError("O corpo deve ser um objeto JSON", field="body")

    return data


def _valor_form(valor: Any) -> Any:
    """Converte escalares do JSON em texto, como chegariam de um form HTML."""
    if valor is None or isinstance(valor, str):
        return valor
    return str(valor)


def validar_form(
    form_class: Type[forms.Form],
    payload: Mapping[str, Any],
    campos_json: Mapping[str, str],
    **form_kwargs,
) -> Dict[str, Any]:
    """
    Valida o payload com um Django Form.

    Args:
        form_class: Classe do Form
        payload: Dados recebidos (chaves do JSON)
        campos_json: Mapa chave JSON -> campo do Form
        form_kwargs: Argumentos extras do Form

    Returns:
        cleaned_data do Form

    Raises:
        ValidationError: Com todos os campos inválidos, pelas chaves do JSON
    """
    data = {
        campo: _valor_form(payload.get(chave))
        for chave, campo in campos_json.items()
    }
    form = form_class(data=data, **form_kwargs)

    if form.is_valid():
        return form.cleaned_data

    chave_por_campo = {campo: chave for chave, campo in campos_json.items()}
    errors = {
        chave_por_campo.get(campo, campo): " ".join(mensagens)
        for campo, mensagens in form.errors.items()
    }
    raise ValidationError.from_errors(errors)


def validar_id(valor: int, name: str) -> int:
    """
    Garante que o ID cabe numa chave BIGINT do banco.

    Raises:
        ValidationError: Se fora do intervalo [ID_MIN, ID_MAX]
    """
    if not ID_MIN <= valor <= ID_MAX:
        raise ValidationError(
            f"{name} deve estar entre {ID_MIN} e {ID_MAX}", field=name
        )
    return valor


def parse_int_param(
    request: HttpRequest,
    name: str,
    min_value: int = ID_MIN,
    max_value: int = ID_MAX,
) -> int:
    """
    Lê parâmetro inteiro obrigatório da query string.

    Raises:
        ValidationError: Se ausente, não numérico ou fora do intervalo
    """
    raw = request.GET.get(name)
    if raw is None or raw == "":
        raise ValidationError(f"{name} é obrigatório", field=name)

    try:
        valor = int(raw)
    except ValueError:
        raise ValidationError(f"{name} deve ser numérico", field=name)

    if not min_value <= valor <= max_value:
        raise ValidationError(
            f"{name} deve estar entre {min_value} e {max_value}", field=name
        )
    return valor


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name="dispatch")
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    def get_service(self, service_name: str):
        """Obtém service do container."""
        return getattr(get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Converte exceções em respostas HTTP.

        - DataConflictError → 409
        - Demais erros de domínio (validação, regra de negócio,
          não encontrado, argumento ilegal) → 400
        - Erro inesperado → 500
        """
        if isinstance(e, DataConflictError):
            logger.info(f"Conflito de dados: {e}")
            return error_response(e, 409)

        if isinstance(e, DomainException):
            logger.info(f"Requisição rejeitada: {e}")
            return error_response(e, 400)

        logger.exception(f"Erro inesperado na API: {e}")
        return error_response(e, 500)
