"""
Repositório Django para persistência de Créditos.

Implementa o CreditoRepository definido no Core.
"""

from typing import List, Optional
import logging
import uuid

from src.core.creditos.entities import CreditoEntity
from src.core.creditos.ports import CreditoRepository as CreditoRepositoryPort

from .models import CreditoModel
from .mappers import CreditoMapper

logger = logging.getLogger(__name__)


class DjangoCreditoRepository(CreditoRepositoryPort):
    """
    Implementação Django do CreditoRepository.

    Example:
        repo = DjangoCreditoRepository()
        repo.save(credito)
        creditos = repo.list_by_cliente(cliente_id)
    """

    def __init__(self):
        self._mapper = CreditoMapper()

    def save(self, credito: CreditoEntity) -> CreditoEntity:
        """
        Persiste crédito (create ou update), usando o código como chave.
        """
        logger.debug(f"Saving credito: {credito.codigo}")

        CreditoModel.objects.update_or_create(
            codigo=credito.codigo,
            defaults={
                'valor': credito.valor,
                'data_primeira_parcela': credito.data_primeira_parcela,
                'numero_parcelas': credito.numero_parcelas,
                'status': credito.status.value,
                'cliente_id': credito.cliente_id,
            },
        )

        logger.info(f"Credito saved: {credito.codigo}")
        return credito

    def get_by_codigo(self, codigo: uuid.UUID) -> Optional[CreditoEntity]:
        try:
            model = CreditoModel.objects.get(codigo=codigo)
            return self._mapper.to_entity(model)
        except CreditoModel.DoesNotExist:
            logger.debug(f"Credito not found: {codigo}")
            return None

    def list_by_cliente(self, cliente_id: int) -> List[CreditoEntity]:
        """
        Lista créditos de um cliente, em ordem de criação.

        Note:
            Não verifica se o cliente existe
        """
        models = CreditoModel.objects.filter(cliente_id=cliente_id).order_by('id')
        return self._mapper.to_entity_list(list(models))
