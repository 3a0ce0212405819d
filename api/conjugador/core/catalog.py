from typing import Optional
import logging

from conjugador.core.config import Settings, settings
from conjugador.core.exceptions import StoreLoadError
from conjugador.services.conjugation_service import Conjugator

logger = logging.getLogger(__name__)

# Current snapshot. Readers hold on to whatever instance they received;
# reload_catalog swaps the reference to a freshly built one.
_conjugator: Optional[Conjugator] = None


def build_conjugator(config: Settings = settings) -> Conjugator:
    """
    Build a snapshot from the configured source tables.

    A StoreLoadError is re-raised unless ``allow_partial_load`` is set, in
    which case the verbs that loaded cleanly are served.
    """
    try:
        return Conjugator.from_settings(config)
    except StoreLoadError as e:
        for error in e.errors:
            logger.error(f"Rejected verb {error}")
        if not config.allow_partial_load or e.store is None:
            raise
        logger.warning(f"Continuing with partial catalog: {e}")
        return Conjugator.from_store(e.store, default_region=config.default_region)


def init_catalog(config: Settings = settings) -> Conjugator:
    """Load the catalog if it has not been loaded yet."""
    global _conjugator
    if _conjugator is None:
        _conjugator = build_conjugator(config)
        logger.info(f"Catalog ready: {_conjugator!r}")
    return _conjugator


def reload_catalog(config: Settings = settings) -> Conjugator:
    """Build a fresh snapshot and swap it in."""
    global _conjugator
    fresh = build_conjugator(config)
    _conjugator = fresh
    logger.info(f"Catalog reloaded: {fresh!r}")
    return fresh


def get_conjugator() -> Conjugator:
    """Dependency for getting the current conjugator snapshot."""
    return init_catalog()
