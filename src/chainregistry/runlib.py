from __future__ import annotations

import dataclasses
import logging

import hyapp.logs as hyapp_logs
import sentry_sdk

from .chains import ChainRegistry
from .common import make_chain_registry
from .settings import Settings

LOGGER = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, kw_only=True)
class InitState:
    settings: Settings
    chain_registry: ChainRegistry


INIT_STATE: dict[str, InitState] = {}


def init_logs(settings: Settings) -> None:
    if settings.opts.env in ("dev", "tests"):
        hyapp_logs.init_dev_logs()
        return

    hyapp_logs.init_logs()
    if settings.opts.sentry_dsn:
        sentry_sdk.init(dsn=settings.opts.sentry_dsn, environment=settings.opts.env)


def check_chain_registry(chain_registry: ChainRegistry) -> None:
    """Raises `ConfigurationError` if the registry can't resolve a default chain"""
    default_chain = chain_registry.get_default_chain()
    LOGGER.info(
        "Chain registry: chain_ids=%r, default=%r (%s)",
        [chain.id for chain in chain_registry.get_chains()],
        default_chain.id,
        default_chain.name,
    )


def init_all(settings: Settings | None = None) -> ChainRegistry:
    """Set up the logging and the deployment's chain registry, failing on an unusable catalog"""
    if settings is None:
        settings = Settings()

    prev_state = INIT_STATE.get("state")
    if prev_state is not None:
        if settings != prev_state.settings:
            prev_settings = prev_state.settings
            raise Exception(f"Trying to initialize with different settings: {settings=!r} != {prev_settings=!r}")
        return prev_state.chain_registry

    init_logs(settings)
    chain_registry = make_chain_registry(settings)
    check_chain_registry(chain_registry)

    INIT_STATE["state"] = InitState(settings=settings, chain_registry=chain_registry)
    return chain_registry
