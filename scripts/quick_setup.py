#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Cria banco de dados SQLite
3. Executa migrations
4. Cria dados de exemplo (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse
from datetime import date
from decimal import Decimal

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    # URL não-PostgreSQL força o fallback para SQLite
    os.environ['DATABASE_URL'] = 'sqlite:///db.sqlite3'

    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data():
    """Cria um cliente e alguns créditos de exemplo via Use Cases."""
    from src.config.container import get_container
    from src.core.clientes.dtos import CadastrarClienteInputDTO
    from src.core.creditos.dtos import SolicitarCreditoInputDTO
    from src.core.shared.exceptions import DataConflictError
    from src.core.shared.validators import somar_meses

    container = get_container()

    print("📝 Criando cliente de exemplo...")

    try:
        cliente = container.cadastrar_cliente_service().execute(
            CadastrarClienteInputDTO(
                nome='Cami',
                sobrenome='Cavalcante',
                cpf='28475934625',
                email='camila@email.com',
                renda=Decimal('1000.00'),
                senha='1234',
                cep='000000',
                rua='Rua da Cami, 123',
            )
        )
    except DataConflictError:
        print("   ⚠️  Cliente de exemplo já existe, nada a fazer.")
        return

    print(f"   ✓ {cliente.nome} {cliente.sobrenome} (id={cliente.id})")

    print("📝 Criando créditos de exemplo...")

    hoje = date.today()
    for valor, parcelas, meses in [('100.00', 15, 1), ('2500.00', 48, 2)]:
        credito = container.solicitar_credito_service().execute(
            SolicitarCreditoInputDTO(
                valor=Decimal(valor),
                data_primeira_parcela=somar_meses(hoje, meses),
                numero_parcelas=parcelas,
                cliente_id=cliente.id,
            )
        )
        print(f"   ✓ {credito.codigo} - {credito.valor} em {parcelas}x")

    print("✅ Dados de exemplo criados!")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import connection

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ Conexão OK!")
        return True
    except Exception as e:
        print(f"❌ Erro de conexão: {e}")
        return False


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Máximo de parcelas: {settings.CREDITO_MAX_PARCELAS}")
    print(f"  Prazo da primeira parcela: {settings.CREDITO_PRAZO_PRIMEIRA_PARCELA_MESES} meses")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. python manage.py runserver")
    print("   2. Acesse: http://localhost:8000/admin/")
    print("   3. Acesse: http://localhost:8000/api/credits?customerId=1")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar dados de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Credit Application System - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está acessível.")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
