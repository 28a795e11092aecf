"""
Exceções de Domínio do Credit Application System.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de campos de entrada)
    ├── BusinessRuleViolationError (regra de negócio violada)
    │   └── EntityNotFoundError (entidade não existe)
    ├── IllegalArgumentError (argumento incoerente com o estado)
    └── DataConflictError (violação de unicidade na persistência)
"""

from typing import Dict, List, Optional


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            service.execute(input_dto)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }

    def details(self) -> List[dict]:
        """Lista de detalhes exposta no envelope de erro da API."""
        return [self.to_dict()]


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando dados fornecidos não atendem aos requisitos
    mínimos para processamento. Pode carregar um único campo
    ou o mapa completo de campos inválidos (vindo de um Form).

    Example:
        if not cpf_valido(cpf):
            raise ValidationError("CPF inválido", field="cpf")

        raise ValidationError.from_errors({
            "numberOfInstallments": "Deve ser no máximo 48",
        })
    """

    def __init__(
        self,
        message: str,
        field: str = None,
        errors: Optional[Dict[str, str]] = None,
    ):
        self.field = field
        self.errors = dict(errors) if errors else {}
        if field and field not in self.errors:
            self.errors[field] = message
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    @classmethod
    def from_errors(cls, errors: Dict[str, str]) -> "ValidationError":
        """Cria erro agregando todos os campos inválidos."""
        campos = ", ".join(sorted(errors))
        return cls(f"Campos inválidos: {campos}", errors=errors)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result

    def details(self) -> List[dict]:
        if not self.errors:
            return [self.to_dict()]

        return [
            {
                "error": f"VALIDATION_ERROR_{campo.upper()}",
                "message": mensagem,
                "field": campo,
            }
            for campo, mensagem in self.errors.items()
        ]


class BusinessRuleViolationError(DomainException):
    """
    Violação de regra de negócio.

    Lançada quando uma operação viola uma regra de negócio
    estabelecida no domínio, mesmo com os campos bem formados.

    Example:
        if data_primeira_parcela >= limite:
            raise BusinessRuleViolationError(
                "Data da primeira parcela inválida",
                rule="prazo_primeira_parcela"
            )
    """

    def __init__(self, message: str, rule: str = None, code: str = None):
        self.rule = rule
        super().__init__(message, code or "BUSINESS_RULE_VIOLATION")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result


class EntityNotFoundError(BusinessRuleViolationError):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID/código não retorna resultado.
    É uma violação de regra de negócio: a requisição referencia
    algo que não existe.

    Example:
        cliente = repo.get_by_id(cliente_id)
        if not cliente:
            raise EntityNotFoundError(f"Cliente {cliente_id} não encontrado")
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, code="ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result


class IllegalArgumentError(DomainException):
    """
    Argumento incoerente com o estado do domínio.

    Distinto de EntityNotFoundError: a entidade existe, mas o
    argumento informado não corresponde a ela (ex: crédito
    consultado com o ID de um cliente que não é o dono).
    """

    def __init__(self, message: str, argument: str = None):
        self.argument = argument
        super().__init__(message, "ILLEGAL_ARGUMENT")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.argument:
            result["argument"] = self.argument
        return result


class DataConflictError(DomainException):
    """
    Conflito de dados na persistência.

    Lançada pelos adapters quando uma restrição de unicidade
    é violada (ex: CPF ou email já cadastrados).
    """

    def __init__(self, message: str):
        super().__init__(message, "DATA_CONFLICT")
