"""
Migration inicial para o domínio de Clientes.

Cria a tabela:
- clientes: Cadastro de clientes (CPF e email únicos)
"""

from django.db import migrations, models


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='ClienteModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('nome', models.CharField(max_length=100)),
                ('sobrenome', models.CharField(max_length=100)),
                ('cpf', models.CharField(
                    max_length=11,
                    unique=True,
                    help_text='CPF somente com dígitos'
                )),
                ('email', models.EmailField(max_length=254, unique=True)),
                ('renda', models.DecimalField(
                    max_digits=14,
                    decimal_places=2,
                    help_text='Renda mensal'
                )),
                ('senha', models.CharField(max_length=128)),
                ('cep', models.CharField(max_length=20)),
                ('rua', models.CharField(max_length=255)),
            ],
            options={
                'verbose_name': 'Cliente',
                'verbose_name_plural': 'Clientes',
                'db_table': 'clientes',
                'ordering': ['id'],
            },
        ),
    ]
