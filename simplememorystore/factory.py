from common.config.settings import StoreSettings, load_settings
from common.utils.logger import get_logger

from simplememorystore.core import Store

logger = get_logger("simplememorystore", component="factory")


def create_store(settings: StoreSettings | None = None) -> Store:
    """Build a :class:`Store` configured from ``settings``.

    When ``settings`` is omitted they are loaded from the environment. With
    ``seed_default_data`` enabled the store comes back holding the default
    tweets and users.
    """
    settings = settings or load_settings()
    store = Store(id_start=settings.id_start)
    if settings.seed_default_data:
        store.init_with_default_data()
    logger.debug(
        "store created",
        id_start=settings.id_start,
        seeded=settings.seed_default_data,
    )
    return store


__all__ = ["create_store"]
