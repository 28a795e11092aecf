"""
Testes para a API JSON de Créditos.

Testa:
- POST /api/credits (sucesso, validação de campo, regra de prazo)
- GET /api/credits?customerId=<id> (lista, vazia, cliente inexistente)
- GET /api/credits/<code>?customerId=<id> (dono, não encontrado, outro cliente)
- Envelope de erro
"""

from datetime import timedelta
import uuid

import pytest

from src.adapters.django_app.creditos.models import CreditoModel

CREDITS_URL = '/api/credits'

pytestmark = pytest.mark.django_db


class TestSolicitarCredito:

    def test_cria_credito(self, post_json, cliente_model, credito_payload, daqui_a):
        response = post_json(CREDITS_URL, credito_payload(cliente_model.id))

        assert response.status_code == 201
        data = response.json()
        assert data['creditValue'] == 100.0
        assert data['numberOfInstallment'] == 15
        assert data['dayFirstOfInstallment'] == daqui_a(2).isoformat()
        assert data['status'] == 'IN_PROGRESS'
        assert data['emailCustomer'] == 'camila@email.com'
        assert data['incomeCustomer'] == 1000.0
        assert CreditoModel.objects.filter(codigo=data['creditCode']).exists()

    def test_quarenta_e_nove_parcelas(self, post_json, cliente_model, credito_payload):
        response = post_json(
            CREDITS_URL, credito_payload(cliente_model.id, numberOfInstallments=49)
        )

        assert response.status_code == 400
        data = response.json()
        assert data['title'] == 'Bad Request! Consult the documentation'
        assert data['status'] == 400
        assert data['exception'] == 'src.core.shared.exceptions.ValidationError'
        assert data['details'][0]['field'] == 'numberOfInstallments'
        assert CreditoModel.objects.count() == 0

    def test_primeira_parcela_em_quatro_meses(
        self, post_json, cliente_model, credito_payload, daqui_a
    ):
        response = post_json(
            CREDITS_URL,
            credito_payload(
                cliente_model.id, dayFirstOfInstallment=daqui_a(4).isoformat()
            ),
        )

        assert response.status_code == 400
        assert response.json()['exception'] == (
            'src.core.shared.exceptions.BusinessRuleViolationError'
        )
        assert CreditoModel.objects.count() == 0

    def test_quarenta_e_oito_parcelas(self, post_json, cliente_model, credito_payload):
        response = post_json(
            CREDITS_URL, credito_payload(cliente_model.id, numberOfInstallments=48)
        )

        assert response.status_code == 201
        assert response.json()['numberOfInstallment'] == 48

    def test_primeira_parcela_no_limite_de_tres_meses(
        self, post_json, cliente_model, credito_payload, daqui_a
    ):
        response = post_json(
            CREDITS_URL,
            credito_payload(
                cliente_model.id, dayFirstOfInstallment=daqui_a(3).isoformat()
            ),
        )

        assert response.status_code == 400
        assert response.json()['exception'] == (
            'src.core.shared.exceptions.BusinessRuleViolationError'
        )
        assert CreditoModel.objects.count() == 0

    def test_primeira_parcela_na_vespera_do_limite(
        self, post_json, cliente_model, credito_payload, daqui_a
    ):
        vespera = daqui_a(3) - timedelta(days=1)

        response = post_json(
            CREDITS_URL,
            credito_payload(cliente_model.id, dayFirstOfInstallment=vespera.isoformat()),
        )

        assert response.status_code == 201
        assert response.json()['dayFirstOfInstallment'] == vespera.isoformat()

    def test_data_como_numero_no_json(self, post_json, cliente_model, credito_payload):
        response = post_json(
            CREDITS_URL,
            credito_payload(cliente_model.id, dayFirstOfInstallment=20261217),
        )

        assert response.status_code == 400
        data = response.json()
        assert data['exception'] == 'src.core.shared.exceptions.ValidationError'
        assert data['details'][0]['field'] == 'dayFirstOfInstallment'

    def test_parcelas_como_texto_no_json(self, post_json, cliente_model, credito_payload):
        response = post_json(
            CREDITS_URL, credito_payload(cliente_model.id, numberOfInstallments='12')
        )

        assert response.status_code == 201
        assert response.json()['numberOfInstallment'] == 12

    def test_primeira_parcela_no_passado(
        self, post_json, cliente_model, credito_payload, daqui_a
    ):
        response = post_json(
            CREDITS_URL,
            credito_payload(
                cliente_model.id, dayFirstOfInstallment=daqui_a(-1).isoformat()
            ),
        )

        assert response.status_code == 400
        data = response.json()
        assert data['exception'] == 'src.core.shared.exceptions.ValidationError'
        assert data['details'][0]['field'] == 'dayFirstOfInstallment'

    def test_varios_campos_invalidos(self, post_json):
        response = post_json(CREDITS_URL, {'creditValue': -5})

        assert response.status_code == 400
        campos = {d['field'] for d in response.json()['details']}
        assert campos == {
            'creditValue',
            'dayFirstOfInstallment',
            'numberOfInstallments',
            'customerId',
        }

    def test_cliente_inexistente(self, post_json, credito_payload):
        response = post_json(CREDITS_URL, credito_payload(999))

        assert response.status_code == 400
        assert response.json()['exception'] == (
            'src.core.shared.exceptions.EntityNotFoundError'
        )

    def test_customer_id_acima_de_bigint(self, post_json, credito_payload):
        response = post_json(CREDITS_URL, credito_payload(2**70))

        assert response.status_code == 400
        assert response.json()['details'][0]['field'] == 'customerId'

    def test_json_invalido(self, api_client):
        response = api_client.post(
            CREDITS_URL, data='{nao e json', content_type='application/json'
        )

        assert response.status_code == 400

    def test_corpo_com_utf8_invalido(self, api_client):
        response = api_client.post(
            CREDITS_URL,
            data=b'{"creditValue": "\xff"}',
            content_type='application/json',
        )

        assert response.status_code == 400
        data = response.json()
        assert data['exception'] == 'src.core.shared.exceptions.ValidationError'
        assert data['details'][0]['field'] == 'body'


class TestListarCreditos:

    def test_lista_creditos_do_cliente(
        self, api_client, post_json, cliente_model, outro_cliente_model, credito_payload
    ):
        post_json(CREDITS_URL, credito_payload(cliente_model.id))
        post_json(CREDITS_URL, credito_payload(cliente_model.id, creditValue=250.5))
        post_json(CREDITS_URL, credito_payload(outro_cliente_model.id))

        response = api_client.get(CREDITS_URL, {'customerId': cliente_model.id})

        assert response.status_code == 200
        data = response.json()
        assert [c['creditValue'] for c in data] == [100.0, 250.5]
        assert set(data[0]) == {
            'creditCode',
            'creditValue',
            'numberOfInstallments',
            'dayFirstOfInstallment',
        }

    def test_cliente_sem_creditos(self, api_client, cliente_model):
        response = api_client.get(CREDITS_URL, {'customerId': cliente_model.id})

        assert response.status_code == 200
        assert response.json() == []

    def test_cliente_inexistente(self, api_client):
        response = api_client.get(CREDITS_URL, {'customerId': 999})

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.parametrize('params', [{}, {'customerId': 'abc'}])
    def test_customer_id_obrigatorio(self, api_client, params):
        response = api_client.get(CREDITS_URL, params)

        assert response.status_code == 400
        assert response.json()['details'][0]['field'] == 'customerId'

    @pytest.mark.parametrize('customer_id', [2**63, 2**70, 0])
    def test_customer_id_fora_do_intervalo(self, api_client, customer_id):
        response = api_client.get(CREDITS_URL, {'customerId': customer_id})

        assert response.status_code == 400
        data = response.json()
        assert data['exception'] == 'src.core.shared.exceptions.ValidationError'
        assert data['details'][0]['field'] == 'customerId'


class TestObterCredito:

    def test_obter_pelo_dono(self, api_client, post_json, cliente_model, credito_payload):
        codigo = post_json(CREDITS_URL, credito_payload(cliente_model.id)).json()['creditCode']

        response = api_client.get(
            f'{CREDITS_URL}/{codigo}', {'customerId': cliente_model.id}
        )

        assert response.status_code == 200
        data = response.json()
        assert data['creditCode'] == codigo
        assert data['creditValue'] == 100.0
        assert data['numberOfInstallment'] == 15
        assert data['status'] == 'IN_PROGRESS'
        assert data['emailCustomer'] == 'camila@email.com'
        assert data['incomeCustomer'] == 1000.0

    def test_codigo_inexistente(self, api_client, cliente_model):
        response = api_client.get(
            f'{CREDITS_URL}/{uuid.uuid4()}', {'customerId': cliente_model.id}
        )

        assert response.status_code == 400
        assert response.json()['exception'] == (
            'src.core.shared.exceptions.EntityNotFoundError'
        )

    def test_outro_cliente(
        self, api_client, post_json, cliente_model, outro_cliente_model, credito_payload
    ):
        codigo = post_json(CREDITS_URL, credito_payload(cliente_model.id)).json()['creditCode']

        response = api_client.get(
            f'{CREDITS_URL}/{codigo}', {'customerId': outro_cliente_model.id}
        )

        assert response.status_code == 400
        data = response.json()
        assert data['exception'] == 'src.core.shared.exceptions.IllegalArgumentError'
        assert data['details'][0]['message'] == 'Contate o administrador'

    def test_codigo_malformado(self, api_client, cliente_model):
        response = api_client.get(
            f'{CREDITS_URL}/nao-e-uuid', {'customerId': cliente_model.id}
        )

        assert response.status_code == 400
        assert response.json()['details'][0]['field'] == 'creditCode'
