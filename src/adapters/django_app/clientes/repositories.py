"""
Repositório Django para persistência de Clientes.

Implementa o ClienteRepository definido no Core.
Violações de unicidade (CPF, email) viram DataConflictError.
"""

from typing import Optional
import logging

from django.db import IntegrityError, transaction

from src.core.clientes.entities import ClienteEntity
from src.core.clientes.ports import ClienteRepository as ClienteRepositoryPort
from src.core.shared.exceptions import DataConflictError

from .models import ClienteModel
from .mappers import ClienteMapper

logger = logging.getLogger(__name__)


class DjangoClienteRepository(ClienteRepositoryPort):
    """
    Implementação Django do ClienteRepository.

    Example:
        repo = DjangoClienteRepository()
        cliente = repo.save(ClienteEntity.cadastrar(...))
        assert cliente.id is not None
    """

    def __init__(self):
        self._mapper = ClienteMapper()

    def save(self, cliente: ClienteEntity) -> ClienteEntity:
        """
        Persiste cliente (create ou update).

        Returns:
            Entidade com o ID atribuído pelo banco

        Raises:
            DataConflictError: Se CPF ou email já pertencem a outro cliente
        """
        logger.debug(f"Saving cliente: {cliente.id or 'novo'}")

        model = self._mapper.to_model(cliente)
        try:
            # Savepoint próprio: a transação externa segue utilizável
            with transaction.atomic():
                model.save()
        except IntegrityError as e:
            logger.info(f"Conflito ao salvar cliente: {e}")
            raise DataConflictError("CPF ou email já cadastrado") from e

        logger.info(f"Cliente saved: {model.id}")
        return self._mapper.to_entity(model)

    def get_by_id(self, cliente_id: int) -> Optional[ClienteEntity]:
        try:
            model = ClienteModel.objects.get(id=cliente_id)
            return self._mapper.to_entity(model)
        except ClienteModel.DoesNotExist:
            logger.debug(f"Cliente not found: {cliente_id}")
            return None

    def delete(self, cliente_id: int) -> None:
        """
        Remove cliente (e seus créditos, via CASCADE).

        Note:
            Não lança erro se o cliente não existir
        """
        deleted_count, _ = ClienteModel.objects.filter(id=cliente_id).delete()

        if deleted_count > 0:
            logger.info(f"Cliente deleted: {cliente_id}")
        else:
            logger.debug(f"Cliente not found for deletion: {cliente_id}")

    def exists(self, cliente_id: int) -> bool:
        return ClienteModel.objects.filter(id=cliente_id).exists()
