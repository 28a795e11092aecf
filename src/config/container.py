"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para injeção explícita.

Padrões:
- Singleton: Uma instância para toda app (repositories, publisher, política)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: Valores lidos do Django settings

Importar este módulo exige o app registry do Django pronto
(os repositórios importam os models).
"""

from typing import Optional

from dependency_injector import containers, providers
from django.conf import settings

from src.core.clientes.use_cases import (
    AtualizarClienteService,
    CadastrarClienteService,
    ObterClienteService,
    RemoverClienteService,
)
from src.core.creditos.entities import PoliticaCredito
from src.core.creditos.use_cases import (
    ListarCreditosPorClienteService,
    ObterCreditoService,
    SolicitarCreditoService,
)
from src.adapters.django_app.clientes.repositories import DjangoClienteRepository
from src.adapters.django_app.creditos.repositories import DjangoCreditoRepository
from src.adapters.django_app.events.publishers import LoggingEventPublisher
from src.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: política de crédito
    - Infrastructure: publicador de eventos
    - Repositories: Persistência
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        container = Container()
        container.config.from_dict({
            'credito': {'max_parcelas': 48, 'prazo_meses': 3},
        })

        service = container.solicitar_credito_service()
        result = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    politica_credito = providers.Singleton(
        PoliticaCredito,
        max_parcelas=config.credito.max_parcelas.as_int(),
        prazo_meses=config.credito.prazo_meses.as_int(),
    )

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(LoggingEventPublisher)

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    cliente_repository = providers.Singleton(DjangoClienteRepository)

    credito_repository = providers.Singleton(DjangoCreditoRepository)

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        DjangoUnitOfWork,
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Services / Use Cases (Factory - nova instância por chamada)
    # =========================================================================

    cadastrar_cliente_service = providers.Factory(
        CadastrarClienteService,
        cliente_repo=cliente_repository,
        uow=unit_of_work,
    )

    # Leitura, sem UoW
    obter_cliente_service = providers.Factory(
        ObterClienteService,
        cliente_repo=cliente_repository,
    )

    atualizar_cliente_service = providers.Factory(
        AtualizarClienteService,
        cliente_repo=cliente_repository,
        uow=unit_of_work,
    )

    remover_cliente_service = providers.Factory(
        RemoverClienteService,
        cliente_repo=cliente_repository,
        uow=unit_of_work,
    )

    solicitar_credito_service = providers.Factory(
        SolicitarCreditoService,
        credito_repo=credito_repository,
        cliente_repo=cliente_repository,
        uow=unit_of_work,
        politica=politica_credito,
    )

    listar_creditos_service = providers.Factory(
        ListarCreditosPorClienteService,
        credito_repo=credito_repository,
    )

    obter_credito_service = providers.Factory(
        ObterCreditoService,
        credito_repo=credito_repository,
        cliente_repo=cliente_repository,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir, carregando a política de crédito do settings.
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict({
            'credito': {
                'max_parcelas': settings.CREDITO_MAX_PARCELAS,
                'prazo_meses': settings.CREDITO_PRAZO_PRIMEIRA_PARCELA_MESES,
            },
        })

    return _container


def reset_container() -> None:
    """Reset do container (para testes)."""
    global _container
    _container = None
