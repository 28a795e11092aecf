"""
Django Models para o domínio de Clientes.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/clientes/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Validação de CPF, email e renda fica na Entity do Core
- Models são mapeados para/de Entities via Mappers
"""

from django.db import models


class ClienteModel(models.Model):
    """
    Model Django para persistência de Clientes.

    Fields:
        id: Auto-incrementing PK
        nome: Primeiro nome
        sobrenome: Sobrenome
        cpf: CPF normalizado (11 dígitos, único)
        email: Email (único)
        renda: Renda mensal
        senha: Senha (opaca)
        cep: CEP do endereço
        rua: Logradouro
    """

    id = models.BigAutoField(primary_key=True)

    nome = models.CharField(max_length=100)
    sobrenome = models.CharField(max_length=100)

    cpf = models.CharField(
        max_length=11,
        unique=True,
        help_text="CPF somente com dígitos"
    )

    email = models.EmailField(
        max_length=254,
        unique=True,
    )

    renda = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        help_text="Renda mensal"
    )

    senha = models.CharField(max_length=128)

    # Endereço
    cep = models.CharField(max_length=20)
    rua = models.CharField(max_length=255)

    class Meta:
        db_table = 'clientes'
        verbose_name = 'Cliente'
        verbose_name_plural = 'Clientes'
        ordering = ['id']

    def __str__(self):
        return f"{self.nome} {self.sobrenome}"

    def __repr__(self):
        return f"<ClienteModel id={self.id} cpf={self.cpf}>"
