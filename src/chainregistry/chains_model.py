from typing import Any, Self

import pydantic
import yaml
from pydantic.alias_generators import to_camel


class _ChainMetaModel(pydantic.BaseModel, frozen=True, populate_by_name=True, alias_generator=to_camel):
    """Chain metadata, (de)serialized with the wallet-library field names (`nativeCurrency`, `rpcUrls`, ...)"""


class NativeCurrency(_ChainMetaModel):
    name: str
    symbol: str
    decimals: int = 18


class ChainRpcUrls(_ChainMetaModel):
    http: tuple[str, ...]
    web_socket: tuple[str, ...] = ()


class ChainBlockExplorer(_ChainMetaModel):
    name: str
    url: str
    api_url: str | None = None


class ChainContract(_ChainMetaModel):
    address: str
    block_created: int | None = None


class ChainDescriptor(_ChainMetaModel):
    id: int = pydantic.Field(gt=0)
    name: str
    native_currency: NativeCurrency
    # group name -> urls; the `default` group is always present.
    rpc_urls: dict[str, ChainRpcUrls]
    block_explorers: dict[str, ChainBlockExplorer] | None = None
    contracts: dict[str, ChainContract] | None = None
    testnet: bool = False

    @pydantic.field_validator("rpc_urls")
    @classmethod
    def _check_default_rpc(cls, value: dict[str, ChainRpcUrls]) -> dict[str, ChainRpcUrls]:
        if "default" not in value:
            raise ValueError("`rpcUrls` must contain the `default` group")
        return value

    @property
    def default_rpc_url(self) -> str | None:
        urls = self.rpc_urls["default"].http
        return urls[0] if urls else None

    @property
    def default_explorer_url(self) -> str | None:
        if not self.block_explorers or "default" not in self.block_explorers:
            return None
        return self.block_explorers["default"].url

    def dump(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ChainsConfig(pydantic.BaseModel, frozen=True):
    """
    Chain catalog, in the same order as configured.

    Accepts either a list of descriptors, or a mapping (or a YAML string of
    it) of `shortname -> descriptor`; `x_`-prefixed keys are skipped.
    """

    chains: tuple[ChainDescriptor, ...] = ()

    @staticmethod
    def _is_extra_key(key: str) -> bool:
        return key.startswith("x_")

    @classmethod
    def prepare_chains_config(cls, value: Any) -> list[Any]:
        if not value:
            return []

        raw_data = yaml.safe_load(value) if isinstance(value, str) else value
        if not raw_data:
            return []
        if isinstance(raw_data, dict):
            return [
                chain_config
                for chain_name, chain_config in raw_data.items()
                if not cls._is_extra_key(str(chain_name))
            ]
        if not isinstance(raw_data, list | tuple):
            raise ValueError(f"Expected a list or a mapping of chains, got {type(raw_data).__name__}")
        return list(raw_data)

    @pydantic.field_validator("chains", mode="before")
    @classmethod
    def _prepare_chains(cls, value: Any) -> list[Any]:
        return cls.prepare_chains_config(value)

    @classmethod
    def load(cls, obj: Any) -> Self:
        if isinstance(obj, cls):
            return obj
        return cls.model_validate({"chains": obj})
