"""
Migration inicial para o domínio de Créditos.

Cria a tabela:
- creditos: Solicitações de crédito, ligadas ao cliente dono
"""

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
        ('clientes', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='CreditoModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('codigo', models.UUIDField(
                    unique=True,
                    editable=False,
                    help_text='Código público do crédito'
                )),
                ('valor', models.DecimalField(max_digits=14, decimal_places=2)),
                ('data_primeira_parcela', models.DateField()),
                ('numero_parcelas', models.PositiveSmallIntegerField()),
                ('status', models.CharField(
                    max_length=20,
                    choices=[
                        ('IN_PROGRESS', 'Em análise'),
                        ('APPROVED', 'Aprovado'),
                        ('REJECT', 'Rejeitado'),
                    ],
                    default='IN_PROGRESS',
                    db_index=True,
                )),
                ('cliente', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='creditos',
                    to='clientes.clientemodel',
                    help_text='Cliente dono do crédito'
                )),
            ],
            options={
                'verbose_name': 'Crédito',
                'verbose_name_plural': 'Créditos',
                'db_table': 'creditos',
                'ordering': ['id'],
            },
        ),
    ]
