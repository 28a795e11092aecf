"""
Django Admin para o domínio de Créditos.

Configuração do admin para acompanhamento das solicitações.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import CreditoModel


@admin.register(CreditoModel)
class CreditoAdmin(admin.ModelAdmin):
    """Admin para CreditoModel."""

    list_display = [
        'codigo_curto',
        'cliente',
        'valor',
        'numero_parcelas',
        'data_primeira_parcela',
        'status_badge',
    ]

    list_filter = [
        'status',
        'data_primeira_parcela',
    ]

    search_fields = [
        'codigo',
        'cliente__cpf',
        'cliente__email',
    ]

    readonly_fields = [
        'codigo',
    ]

    list_select_related = ['cliente']

    ordering = ['-id']

    def codigo_curto(self, obj):
        """Exibe código curto (primeiros 8 caracteres)."""
        return str(obj.codigo)[:8] + '...'
    codigo_curto.short_description = 'Código'

    def status_badge(self, obj):
        """Exibe status com badge colorido."""
        colors = {
            'IN_PROGRESS': '#ffc107',
            'APPROVED': '#28a745',
            'REJECT': '#dc3545',
        }
        color = colors.get(obj.status, '#6c757d')
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; '
            'border-radius: 3px; font-size: 11px;">{}</span>',
            color,
            obj.get_status_display()
        )
    status_badge.short_description = 'Status'
