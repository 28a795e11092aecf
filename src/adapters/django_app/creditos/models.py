"""
Django Models para o domínio de Créditos.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/creditos/entities.py.

Relacionamentos:
- CreditoModel → ClienteModel (N:1, removido junto com o cliente)
"""

from django.db import models

from src.adapters.django_app.clientes.models import ClienteModel


class CreditoStatusChoices(models.TextChoices):
    """Choices para status de crédito (espelha CreditoStatus do Core)."""
    IN_PROGRESS = 'IN_PROGRESS', 'Em análise'
    APPROVED = 'APPROVED', 'Aprovado'
    REJECT = 'REJECT', 'Rejeitado'


class CreditoModel(models.Model):
    """
    Model Django para persistência de Créditos.

    Fields:
        id: Auto-incrementing PK (interno)
        codigo: UUID gerado pela Entity, identificador externo
        valor: Valor do crédito
        data_primeira_parcela: Vencimento da primeira parcela
        numero_parcelas: Quantidade de parcelas
        status: Estado atual (choices)
        cliente: Cliente dono
    """

    id = models.BigAutoField(primary_key=True)

    codigo = models.UUIDField(
        unique=True,
        editable=False,
        help_text="Código público do crédito"
    )

    valor = models.DecimalField(
        max_digits=14,
        decimal_places=2,
    )

    data_primeira_parcela = models.DateField()

    numero_parcelas = models.PositiveSmallIntegerField()

    status = models.CharField(
        max_length=20,
        choices=CreditoStatusChoices.choices,
        default=CreditoStatusChoices.IN_PROGRESS,
        db_index=True,
    )

    cliente = models.ForeignKey(
        ClienteModel,
        on_delete=models.CASCADE,
        related_name='creditos',
        help_text="Cliente dono do crédito"
    )

    class Meta:
        db_table = 'creditos'
        verbose_name = 'Crédito'
        verbose_name_plural = 'Créditos'
        ordering = ['id']

    def __str__(self):
        return f"[{str(self.codigo)[:8]}] {self.valor}"

    def __repr__(self):
        return f"<CreditoModel codigo={str(self.codigo)[:8]} status={self.status}>"
