"""
Django Forms para validação de entrada de Créditos.

Validação estrutural apenas: o prazo da primeira parcela
é regra de negócio e fica na Entity.
"""

from datetime import date

from django import forms
from django.conf import settings

from src.core.shared import validators

from ..shared.api import ID_MAX, ID_MIN


CAMPOS_SOLICITACAO = {
    'creditValue': 'valor',
    'dayFirstOfInstallment': 'data_primeira_parcela',
    'numberOfInstallments': 'numero_parcelas',
    'customerId': 'cliente_id',
}


class CreditoForm(forms.Form):
    """
    Form para solicitação de crédito.

    Valida dados antes de passar para SolicitarCreditoService.
    O limite de parcelas vem de settings.CREDITO_MAX_PARCELAS.
    """

    valor = forms.DecimalField(
        max_digits=14,
        decimal_places=2,
        min_value=0,
        error_messages={
            'required': 'Valor do crédito é obrigatório',
            'invalid': 'Valor do crédito deve ser um número',
            'min_value': 'Valor do crédito não pode ser negativo',
        },
    )

    data_primeira_parcela = forms.DateField(
        input_formats=['%Y-%m-%d'],
        error_messages={
            'required': 'Data da primeira parcela é obrigatória',
            'invalid': 'Data deve estar no formato AAAA-MM-DD',
        },
    )

    numero_parcelas = forms.IntegerField(
        error_messages={
            'required': 'Número de parcelas é obrigatório',
            'invalid': 'Número de parcelas deve ser inteiro',
        },
    )

    cliente_id = forms.IntegerField(
        min_value=ID_MIN,
        max_value=ID_MAX,
        error_messages={
            'required': 'ID do cliente é obrigatório',
            'invalid': 'ID do cliente deve ser numérico',
            'min_value': 'ID do cliente fora do intervalo válido',
            'max_value': 'ID do cliente fora do intervalo válido',
        },
    )

    def __init__(self, *args, hoje: date = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.hoje = hoje or date.today()
        self.max_parcelas = settings.CREDITO_MAX_PARCELAS

    def clean_numero_parcelas(self):
        numero_parcelas = self.cleaned_data['numero_parcelas']
        if not validators.dentro_do_intervalo(numero_parcelas, 1, self.max_parcelas):
            raise forms.ValidationError(
                f'Número de parcelas deve estar entre 1 e {self.max_parcelas}'
            )
        return numero_parcelas

    def clean_data_primeira_parcela(self):
        data = self.cleaned_data['data_primeira_parcela']
        if not validators.data_futura(data, self.hoje):
            raise forms.ValidationError('Data da primeira parcela deve ser futura')
        return data
