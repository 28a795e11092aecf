"""
Entidades do Domínio de Clientes.

Entidades:
- ClienteEntity: Cliente que solicita créditos

Regras de Negócio Encapsuladas:
- CPF com dígitos verificadores válidos
- Email sintaticamente válido
- Renda não negativa
- ID atribuído pelo armazenamento, imutável após criação
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from src.core.shared.exceptions import ValidationError
from src.core.shared import validators


@dataclass
class ClienteEntity:
    """
    Entidade de Domínio: Cliente.

    Invariantes:
    - Nome, sobrenome, senha, CEP e rua não podem ser vazios
    - CPF válido (formato e dígitos verificadores)
    - Email válido
    - Renda >= 0

    Attributes:
        id: Identificador numérico (None até ser persistido)
        nome: Primeiro nome
        sobrenome: Sobrenome
        cpf: CPF normalizado (11 dígitos)
        email: Email (único)
        renda: Renda mensal
        senha: Senha (opaca, apenas armazenada)
        cep: CEP do endereço
        rua: Logradouro

    Example:
        cliente = ClienteEntity.cadastrar(
            nome="Cami",
            sobrenome="Cavalcante",
            cpf="28475934625",
            email="camila@email.com",
            renda=Decimal("1000.0"),
            senha="1234",
            cep="000000",
            rua="Rua da Cami, 123",
        )
    """

    nome: str = ""
    sobrenome: str = ""
    cpf: str = ""
    email: str = ""
    renda: Decimal = Decimal("0")
    senha: str = ""
    cep: str = ""
    rua: str = ""
    id: Optional[int] = None

    @classmethod
    def cadastrar(
        cls,
        nome: str,
        sobrenome: str,
        cpf: str,
        email: str,
        renda: Decimal,
        senha: str,
        cep: str,
        rua: str,
    ) -> "ClienteEntity":
        """
        Factory method para cadastrar cliente com validações.

        Raises:
            ValidationError: Se algum campo for inválido
        """
        cls._validar_obrigatorio(nome, "nome")
        cls._validar_obrigatorio(sobrenome, "sobrenome")
        if not validators.cpf_valido(cpf):
            raise ValidationError("CPF inválido", field="cpf")
        if not validators.email_valido(email):
            raise ValidationError("Email inválido", field="email")
        cls._validar_renda(renda)
        cls._validar_obrigatorio(senha, "senha")
        cls._validar_obrigatorio(cep, "cep")
        cls._validar_obrigatorio(rua, "rua")

        return cls(
            nome=nome.strip(),
            sobrenome=sobrenome.strip(),
            cpf=validators.normalizar_cpf(cpf.strip()),
            email=email.strip(),
            renda=Decimal(str(renda)),
            senha=senha,
            cep=cep.strip(),
            rua=rua.strip(),
        )

    def atualizar(
        self,
        nome: str,
        sobrenome: str,
        renda: Decimal,
        cep: str,
        rua: str,
    ) -> None:
        """
        Atualiza os campos mutáveis do cliente.

        CPF, email e senha não são alterados por esta operação.

        Raises:
            ValidationError: Se algum campo for inválido
        """
        self._validar_obrigatorio(nome, "nome")
        self._validar_obrigatorio(sobrenome, "sobrenome")
        self._validar_renda(renda)
        self._validar_obrigatorio(cep, "cep")
        self._validar_obrigatorio(rua, "rua")

        self.nome = nome.strip()
        self.sobrenome = sobrenome.strip()
        self.renda = Decimal(str(renda))
        self.cep = cep.strip()
        self.rua = rua.strip()

    @staticmethod
    def _validar_obrigatorio(valor: str, campo: str) -> None:
        if not valor or not valor.strip():
            raise ValidationError(f"{campo} é obrigatório", field=campo)

    @staticmethod
    def _validar_renda(renda) -> None:
        if not validators.decimal_nao_negativo(renda):
            raise ValidationError("Renda deve ser um valor não negativo", field="renda")

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, ClienteEntity):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def __repr__(self) -> str:
        return f"ClienteEntity(id={self.id}, email='{self.email}')"
