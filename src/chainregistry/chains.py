"""
Supported chains: lookup, enumeration and default selection over a fixed catalog.

The process-wide `CHAIN_REGISTRY` is built from the compiled-in catalog at
import time and never changes afterwards; the module-level functions query it.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .blockchains import CHAINS, MAINNET_CHAIN_ID

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .chains_model import ChainDescriptor

LOGGER = logging.getLogger(__name__)

DEFAULT_CHAIN_ID = MAINNET_CHAIN_ID


class ConfigurationError(Exception):
    """The chain catalog of the current deployment is unusable (e.g. empty)"""


class ChainRegistry:
    def __init__(self, chains: Iterable[ChainDescriptor], default_chain_id: int = DEFAULT_CHAIN_ID) -> None:
        chain_by_id: dict[int, ChainDescriptor] = {}
        for chain in chains:
            if chain.id in chain_by_id:
                prev_name = chain_by_id[chain.id].name
                raise ConfigurationError(f"Duplicate chain id {chain.id}: {chain.name!r}, {prev_name!r}")
            chain_by_id[chain.id] = chain
        self._chain_by_id: Mapping[int, ChainDescriptor] = MappingProxyType(chain_by_id)
        self.default_chain_id = default_chain_id

    def __repr__(self) -> str:
        chain_ids = list(self._chain_by_id)
        return f"{self.__class__.__name__}(chain_ids={chain_ids}, default_chain_id={self.default_chain_id})"

    def __len__(self) -> int:
        return len(self._chain_by_id)

    def get_chains(self) -> tuple[ChainDescriptor, ...]:
        """All the chains, in the catalog order"""
        chains = tuple(self._chain_by_id.values())
        if not chains:
            raise ConfigurationError("No suitable chain configurations are available.")
        return chains

    def get_chain_by_id(self, chain_id: int | None = None) -> ChainDescriptor | None:
        # `0` is treated the same as a missing id.
        if not chain_id:
            return None
        return self._chain_by_id.get(chain_id)

    def get_chain_by_name(self, name: str | None) -> ChainDescriptor | None:
        if not name:
            return None
        name_norm = name.lower()
        return next((chain for chain in self._chain_by_id.values() if chain.name.lower() == name_norm), None)

    def get_default_chain(self) -> ChainDescriptor:
        """
        The chain with `default_chain_id` if it is in the catalog,
        otherwise the first chain of the catalog.
        """
        chains = tuple(self._chain_by_id.values())
        if not chains:
            raise ConfigurationError("No suitable chain configurations are available for the current deployment mode.")

        default_chain = next((chain for chain in chains if chain.id == self.default_chain_id), None)
        if default_chain is None:
            LOGGER.debug(
                "Default chain %r is not in the catalog, falling back to %r", self.default_chain_id, chains[0].id
            )
            return chains[0]
        return default_chain

    def get_default_chain_id(self) -> int:
        return self.get_default_chain().id

    def is_supported_chain(self, chain_id: int) -> bool:
        return chain_id in self._chain_by_id

    def summary(self) -> list[dict[str, Any]]:
        default_chain_id = self.get_default_chain_id()
        return [
            {
                "id": chain.id,
                "name": chain.name,
                "symbol": chain.native_currency.symbol,
                "rpc_url": chain.default_rpc_url,
                "explorer_url": chain.default_explorer_url,
                "is_default": chain.id == default_chain_id,
            }
            for chain in self.get_chains()
        ]


CHAIN_REGISTRY = ChainRegistry(CHAINS)


def get_chains() -> tuple[ChainDescriptor, ...]:
    return CHAIN_REGISTRY.get_chains()


def get_chain_by_id(chain_id: int | None = None) -> ChainDescriptor | None:
    return CHAIN_REGISTRY.get_chain_by_id(chain_id)


def get_chain_by_name(name: str | None) -> ChainDescriptor | None:
    return CHAIN_REGISTRY.get_chain_by_name(name)


def get_default_chain() -> ChainDescriptor:
    return CHAIN_REGISTRY.get_default_chain()


def get_default_chain_id() -> int:
    return CHAIN_REGISTRY.get_default_chain_id()


def is_supported_chain(chain_id: int) -> bool:
    return CHAIN_REGISTRY.is_supported_chain(chain_id)
