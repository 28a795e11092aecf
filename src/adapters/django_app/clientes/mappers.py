"""
Mapper para conversão entre ClienteEntity (Core) e ClienteModel (Django).

Mappers são stateless e não contêm lógica de negócio.
"""

from src.core.clientes.entities import ClienteEntity

from .models import ClienteModel


class ClienteMapper:
    """
    Responsável por:
    - to_model(): Entity → Model
    - to_entity(): Model → Entity
    """

    @staticmethod
    def to_model(entity: ClienteEntity) -> ClienteModel:
        """
        Converte ClienteEntity para ClienteModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return ClienteModel(
            id=entity.id,
            nome=entity.nome,
            sobrenome=entity.sobrenome,
            cpf=entity.cpf,
            email=entity.email,
            renda=entity.renda,
            senha=entity.senha,
            cep=entity.cep,
            rua=entity.rua,
        )

    @staticmethod
    def to_entity(model: ClienteModel) -> ClienteEntity:
        """
        Converte ClienteModel para ClienteEntity.

        Note:
            Bypassa validações do factory method .cadastrar()
            pois os dados já foram validados no cadastro
        """
        return ClienteEntity(
            id=model.id,
            nome=model.nome,
            sobrenome=model.sobrenome,
            cpf=model.cpf,
            email=model.email,
            renda=model.renda,
            senha=model.senha,
            cep=model.cep,
            rua=model.rua,
        )
