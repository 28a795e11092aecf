"""Django Admin para o domínio de Clientes."""

from django.contrib import admin

from .models import ClienteModel


@admin.register(ClienteModel)
class ClienteAdmin(admin.ModelAdmin):
    """Admin para ClienteModel."""

    list_display = [
        'id',
        'nome',
        'sobrenome',
        'cpf_formatado',
        'email',
        'renda',
    ]

    search_fields = [
        'nome',
        'sobrenome',
        'cpf',
        'email',
    ]

    fieldsets = [
        ('Identificação', {
            'fields': ['nome', 'sobrenome', 'cpf', 'email'],
        }),
        ('Renda', {
            'fields': ['renda'],
        }),
        ('Endereço', {
            'fields': ['cep', 'rua'],
        }),
    ]

    ordering = ['id']

    def cpf_formatado(self, obj):
        """Exibe CPF no formato XXX.XXX.XXX-XX."""
        c = obj.cpf
        return f"{c[:3]}.{c[3:6]}.{c[6:9]}-{c[9:]}"
    cpf_formatado.short_description = 'CPF'
