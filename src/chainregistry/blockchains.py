from pathlib import Path
from typing import Any

import orjson

from .chains_model import ChainDescriptor, ChainsConfig

HERE = Path(__file__).parent
# shortname -> descriptor, in the catalog order.
CHAINS_RAW: dict[str, dict[str, Any]] = orjson.loads((HERE / "blockchains.json").read_text())
CHAINS_CONFIG = ChainsConfig.load(CHAINS_RAW)
CHAINS: tuple[ChainDescriptor, ...] = CHAINS_CONFIG.chains
CHAIN_BY_ID = {chain.id: chain for chain in CHAINS}
CHAIN_BY_SHORTNAME = {shortname.lower(): CHAIN_BY_ID[int(info["id"])] for shortname, info in CHAINS_RAW.items()}

MAINNET_CHAIN_ID = CHAIN_BY_SHORTNAME["mainnet"].id
DARWINIA_CHAIN_ID = CHAIN_BY_SHORTNAME["darwinia"].id
