"""Configuração do Django App para Créditos."""

from django.apps import AppConfig


class CreditosConfig(AppConfig):
    """Configuração do app Créditos."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.creditos'
    label = 'creditos'
    verbose_name = 'Solicitações de Crédito'
