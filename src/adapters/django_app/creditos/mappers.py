"""
Mapper para conversão entre CreditoEntity (Core) e CreditoModel (Django).

Mappers são stateless e não contêm lógica de negócio.
"""

from typing import List

from src.core.creditos.entities import CreditoEntity, CreditoStatus

from .models import CreditoModel


class CreditoMapper:
    """
    Responsável por:
    - to_model(): Entity → Model
    - to_entity(): Model → Entity
    - to_entity_list(): List[Model] → List[Entity]
    """

    @staticmethod
    def to_model(entity: CreditoEntity) -> CreditoModel:
        """
        Converte CreditoEntity para CreditoModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return CreditoModel(
            codigo=entity.codigo,
            valor=entity.valor,
            data_primeira_parcela=entity.data_primeira_parcela,
            numero_parcelas=entity.numero_parcelas,
            status=entity.status.value,
            cliente_id=entity.cliente_id,
        )

    @staticmethod
    def to_entity(model: CreditoModel) -> CreditoEntity:
        """
        Converte CreditoModel para CreditoEntity.

        Note:
            Bypassa validações do factory method .solicitar():
            um crédito antigo pode ter a primeira parcela no passado
        """
        return CreditoEntity(
            codigo=model.codigo,
            valor=model.valor,
            data_primeira_parcela=model.data_primeira_parcela,
            numero_parcelas=model.numero_parcelas,
            status=CreditoStatus(model.status),
            cliente_id=model.cliente_id,
        )

    @classmethod
    def to_entity_list(cls, models: List[CreditoModel]) -> List[CreditoEntity]:
        return [cls.to_entity(model) for model in models]
