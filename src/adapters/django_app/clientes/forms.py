"""
Django Forms para validação de entrada de Clientes.

Forms são DRIVING ADAPTERS que validam dados antes de
passar para os Use Cases. Os mapas CAMPOS_* ligam as chaves
do JSON da API aos campos dos Forms.
"""

from django import forms

from src.core.shared import validators


CAMPOS_CADASTRO = {
    'firstName': 'nome',
    'lastName': 'sobrenome',
    'cpf': 'cpf',
    'email': 'email',
    'income': 'renda',
    'password': 'senha',
    'zipCode': 'cep',
    'street': 'rua',
}

CAMPOS_ATUALIZACAO = {
    'firstName': 'nome',
    'lastName': 'sobrenome',
    'income': 'renda',
    'zipCode': 'cep',
    'street': 'rua',
}


class ClienteUpdateForm(forms.Form):
    """
    Form para atualização de cliente.

    Valida dados antes de passar para AtualizarClienteService.
    """

    nome = forms.CharField(
        max_length=100,
        error_messages={'required': 'Nome é obrigatório'},
    )

    sobrenome = forms.CharField(
        max_length=100,
        error_messages={'required': 'Sobrenome é obrigatório'},
    )

    renda = forms.DecimalField(
        max_digits=14,
        decimal_places=2,
        min_value=0,
        error_messages={
            'required': 'Renda é obrigatória',
            'invalid': 'Renda deve ser um número',
            'min_value': 'Renda não pode ser negativa',
        },
    )

    cep = forms.CharField(
        max_length=20,
        error_messages={'required': 'CEP é obrigatório'},
    )

    rua = forms.CharField(
        max_length=255,
        error_messages={'required': 'Rua é obrigatória'},
    )


class ClienteForm(ClienteUpdateForm):
    """
    Form para cadastro de cliente.

    Acrescenta CPF, email e senha aos campos editáveis.
    """

    cpf = forms.CharField(
        max_length=14,
        error_messages={'required': 'CPF é obrigatório'},
    )

    email = forms.EmailField(
        max_length=254,
        error_messages={
            'required': 'Email é obrigatório',
            'invalid': 'Email inválido',
        },
    )

    senha = forms.CharField(
        max_length=128,
        error_messages={'required': 'Senha é obrigatória'},
    )

    def clean_cpf(self):
        cpf = self.cleaned_data['cpf'].strip()
        if not validators.cpf_valido(cpf):
            raise forms.ValidationError('CPF inválido')
        return cpf
