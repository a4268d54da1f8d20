
"""Bootstrap do container de DI (kink): monta o único CartStore da aplicação."""
from kink import di
from .settings import Settings
from .logging import get_logger
from .db import create_session_factory
from ..connectors.inventory.http_inventory_client import HttpInventoryClient
from ..connectors.notify.log_notifier import LogNotifier
from ..repo.state_store import SqlPersistentState
from ..ports.interfaces import InventoryClient, PersistentState, Notifier
from ..domain.services.cart_store import CartStore

def build_cart_store(settings: Settings, session_factory=None) -> CartStore:
    """Cria o CartStore com adapters concretos (injeção explícita, sem container)."""
    session_factory = session_factory or create_session_factory(settings.database_url)
    return CartStore(
        inventory=HttpInventoryClient(settings),
        state=SqlPersistentState(session_factory),
        notifier=LogNotifier(get_logger(settings.log_level)),
        namespace_key=settings.cart_namespace_key,
    )

def bootstrap_di(settings: Settings | None = None) -> CartStore:
    """Registra settings, adapters e o CartStore no container e o retorna."""
    settings = settings or Settings()
    session_factory = create_session_factory(settings.database_url)
    logger = get_logger(settings.log_level)
    di[Settings] = settings
    # sessionmaker é chamável: registrado via factory para o kink não invocá-lo
    di["session_factory"] = lambda _: session_factory
    di["logger"] = lambda _: logger
    di[InventoryClient] = HttpInventoryClient(settings)
    di[PersistentState] = SqlPersistentState(session_factory)
    di[Notifier] = LogNotifier(logger)
    di[CartStore] = CartStore(
        inventory=di[InventoryClient],
        state=di[PersistentState],
        notifier=di[Notifier],
        namespace_key=settings.cart_namespace_key,
    )
    return di[CartStore]
