"""
Regras de validação puras compartilhadas pelos domínios.

Funções sem dependência de framework, usadas tanto pelas
Entities (invariantes) quanto pelos Forms (validação de entrada).
"""

import calendar
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional

_CPF_FORMATADO = re.compile(r"^\d{3}\.\d{3}\.\d{3}-\d{2}$")
_CPF_NUMERICO = re.compile(r"^\d{11}$")
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalizar_cpf(cpf: str) -> str:
    """Remove pontuação de um CPF formatado (XXX.XXX.XXX-XX)."""
    return re.sub(r"[.\-]", "", cpf or "")


def _digito_verificador(digitos: list) -> int:
    peso_inicial = len(digitos) + 1
    total = sum(d * w for d, w in zip(digitos, range(peso_inicial, 1, -1)))
    resto = 11 - (total % 11)
    return 0 if resto >= 10 else resto


def cpf_valido(cpf: Optional[str]) -> bool:
    """
    Verifica formato e dígitos verificadores de um CPF.

    Aceita 11 dígitos puros ou o formato XXX.XXX.XXX-XX.
    Sequências de dígitos repetidos (111.111.111-11) são inválidas.

    Args:
        cpf: CPF a validar

    Returns:
        True se o CPF é válido
    """
    if not cpf:
        return False

    cpf = cpf.strip()
    if not (_CPF_NUMERICO.match(cpf) or _CPF_FORMATADO.match(cpf)):
        return False

    digitos = [int(c) for c in normalizar_cpf(cpf)]
    if len(set(digitos)) == 1:
        return False

    primeiro = _digito_verificador(digitos[:9])
    segundo = _digito_verificador(digitos[:9] + [primeiro])
    return digitos[9] == primeiro and digitos[10] == segundo


def email_valido(email: Optional[str]) -> bool:
    """Validação sintática simples de email."""
    return bool(email) and bool(_EMAIL.match(email.strip()))


def decimal_nao_negativo(valor) -> bool:
    """Verifica se o valor é um decimal >= 0."""
    if valor is None or isinstance(valor, bool):
        return False
    try:
        return Decimal(str(valor)) >= 0
    except (InvalidOperation, ValueError):
        return False


def dentro_do_intervalo(valor: int, minimo: int, maximo: int) -> bool:
    """Intervalo fechado [minimo, maximo]."""
    return minimo <= valor <= maximo


def somar_meses(data: date, meses: int) -> date:
    """
    Soma meses a uma data.

    Quando o dia não existe no mês de destino, usa o último
    dia do mês (31/01 + 1 mês = 28/02 ou 29/02).
    """
    indice = data.month - 1 + meses
    ano = data.year + indice // 12
    mes = indice % 12 + 1
    ultimo_dia = calendar.monthrange(ano, mes)[1]
    return date(ano, mes, min(data.day, ultimo_dia))


def data_futura(data: date, hoje: Optional[date] = None) -> bool:
    """Verifica se a data é estritamente posterior a hoje."""
    hoje = hoje or date.today()
    return data > hoje


def dentro_do_prazo(data: date, meses: int, hoje: Optional[date] = None) -> bool:
    """
    Verifica se a data é anterior a hoje + `meses` meses.

    O limite é exclusivo: exatamente hoje + `meses` já está fora do prazo.
    """
    hoje = hoje or date.today()
    return data < somar_meses(hoje, meses)
