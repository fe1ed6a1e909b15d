import pydantic
import pytest
import yaml

from chainregistry.chains import CHAIN_REGISTRY, ConfigurationError
from chainregistry.chains_model import ChainsConfig
from chainregistry.common import make_chain_registry
from chainregistry.settings import Settings, SettingsOptsBase

SAMPLE_CHAINS_CONFIG_YAML = """
networka:
  id: 1
  name: NetworkA
  nativeCurrency: {name: Ether, symbol: ETH, decimals: 18}
  rpcUrls: {default: {http: ["https://rpc.networka.example"]}}
networkb:
  id: 2
  name: NetworkB
  nativeCurrency: {name: Bee, symbol: BBB, decimals: 18}
  rpcUrls: {default: {http: ["https://rpc.networkb.example"]}}
"""
SAMPLE_CHAINS_CONFIG = yaml.safe_load(SAMPLE_CHAINS_CONFIG_YAML)


def test_chains_config_settings() -> None:
    settings = Settings(opts=SettingsOptsBase(env="tests", chains_config=SAMPLE_CHAINS_CONFIG))
    config = settings.opts.chains_config
    assert isinstance(config, ChainsConfig)
    assert [chain.name for chain in config.chains] == ["NetworkA", "NetworkB"]

    settings_yaml = Settings(opts=SettingsOptsBase(env="tests", chains_config=SAMPLE_CHAINS_CONFIG_YAML))
    assert settings_yaml.opts.chains_config == config


def test_settings_repr_hides_values() -> None:
    opts = SettingsOptsBase(env="tests", sentry_dsn="https://key@sentry.example/1")
    assert "sentry.example" not in repr(opts)
    assert repr(opts).startswith("SettingsOptsBase(env=tests, hash=")


def test_make_chain_registry_default() -> None:
    settings = Settings(opts=SettingsOptsBase(env="tests"))
    assert make_chain_registry(settings) is CHAIN_REGISTRY


def test_make_chain_registry_default_id_override() -> None:
    settings = Settings(opts=SettingsOptsBase(env="tests", default_chain_id=46))
    registry = make_chain_registry(settings)
    assert registry is not CHAIN_REGISTRY
    assert registry.get_chains() == CHAIN_REGISTRY.get_chains()
    assert registry.get_default_chain_id() == 46
    # The process-wide registry stays as it was.
    assert CHAIN_REGISTRY.get_default_chain_id() == 1


def test_make_chain_registry_override() -> None:
    settings = Settings(opts=SettingsOptsBase(env="tests", chains_config=SAMPLE_CHAINS_CONFIG, default_chain_id=2))
    registry = make_chain_registry(settings)
    assert [chain.id for chain in registry.get_chains()] == [1, 2]
    assert registry.get_default_chain().name == "NetworkB"
    assert not registry.is_supported_chain(46)


def test_make_chain_registry_empty_override() -> None:
    settings = Settings(opts=SettingsOptsBase(env="tests", chains_config={}))
    registry = make_chain_registry(settings)
    with pytest.raises(ConfigurationError):
        registry.get_default_chain()


def test_chains_config_settings_invalid() -> None:
    with pytest.raises(pydantic.ValidationError):
        SettingsOptsBase(env="tests", chains_config="5")
