import logging

from .chains import CHAIN_REGISTRY, ChainRegistry
from .settings import Settings

LOGGER = logging.getLogger(__name__)


def make_chain_registry(settings: Settings) -> ChainRegistry:
    """Registry for the deployment: the compiled-in one unless the settings override the catalog or the default"""
    chains_config = settings.opts.chains_config
    default_chain_id = settings.opts.default_chain_id

    if chains_config is None:
        if default_chain_id == CHAIN_REGISTRY.default_chain_id:
            return CHAIN_REGISTRY
        return ChainRegistry(CHAIN_REGISTRY.get_chains(), default_chain_id=default_chain_id)

    LOGGER.info(
        "Using overridden chains config: chain_ids=%r, default_chain_id=%r",
        [chain.id for chain in chains_config.chains],
        default_chain_id,
    )
    return ChainRegistry(chains_config.chains, default_chain_id=default_chain_id)
