"""Chain families and feature flags.

Every family is an explicit, hand-maintained set of named chains.
We never guess family membership from names or chain id ranges.
A chain missing from a family is not a member of it,
so a new chain needs to be added here by hand.

Families may overlap, e.g. Base Sepolia is both an OP stack chain and a testnet.

Chains not in the registry do not belong to any family.
"""

from typing import FrozenSet, Optional, Set, Union

from namedchains.chain import Chain
from namedchains.chain_data import CHAIN_DATA, LEGACY_CHAINS, SHANGHAI_CHAINS, TESTNET_CHAINS
from namedchains.named import NamedChain, lookup_by_id


def _from_allow_list(internal_ids: FrozenSet[str]) -> FrozenSet[NamedChain]:
    return frozenset(member for member, row in zip(NamedChain, CHAIN_DATA) if row["internal_id"] in internal_ids)


#: Ethereum mainnet and its testnets
ETHEREUM: FrozenSet[NamedChain] = frozenset({
    NamedChain.mainnet,
    NamedChain.morden,
    NamedChain.ropsten,
    NamedChain.rinkeby,
    NamedChain.goerli,
    NamedChain.kovan,
    NamedChain.holesky,
    NamedChain.sepolia,
})

#: OP stack chains, including the Superchain members
OPTIMISM: FrozenSet[NamedChain] = frozenset({
    NamedChain.optimism,
    NamedChain.optimism_goerli,
    NamedChain.optimism_kovan,
    NamedChain.optimism_sepolia,
    NamedChain.base,
    NamedChain.base_goerli,
    NamedChain.base_sepolia,
    NamedChain.fraxtal,
    NamedChain.fraxtal_testnet,
    NamedChain.ink,
    NamedChain.ink_sepolia,
    NamedChain.mode,
    NamedChain.mode_sepolia,
    NamedChain.pgn,
    NamedChain.pgn_sepolia,
    NamedChain.zora,
    NamedChain.blast_sepolia,
    NamedChain.opbnb_mainnet,
    NamedChain.opbnb_testnet,
    NamedChain.soneium,
    NamedChain.soneium_minato_testnet,
    NamedChain.odyssey,
    NamedChain.world,
    NamedChain.world_sepolia,
    NamedChain.unichain,
    NamedChain.unichain_sepolia,
    NamedChain.happychain_testnet,
    NamedChain.lisk,
    NamedChain.celo,
    NamedChain.katana,
})

#: Arbitrum One, Nova and their testnets
ARBITRUM: FrozenSet[NamedChain] = frozenset({
    NamedChain.arbitrum,
    NamedChain.arbitrum_testnet,
    NamedChain.arbitrum_goerli,
    NamedChain.arbitrum_sepolia,
    NamedChain.arbitrum_nova,
})

POLYGON: FrozenSet[NamedChain] = frozenset({
    NamedChain.polygon,
    NamedChain.polygon_amoy,
})

GNOSIS: FrozenSet[NamedChain] = frozenset({
    NamedChain.gnosis,
    NamedChain.chiado,
})

#: ZK stack chains of the elastic network
ELASTIC: FrozenSet[NamedChain] = frozenset({
    NamedChain.zk_sync,
    NamedChain.zk_sync_testnet,
    NamedChain.abstract,
    NamedChain.abstract_testnet,
    NamedChain.sophon,
    NamedChain.sophon_testnet,
    NamedChain.lens,
    NamedChain.lens_testnet,
})

#: Local development chains
DEV: FrozenSet[NamedChain] = frozenset({
    NamedChain.dev,
    NamedChain.anvil_hardhat,
    NamedChain.cannon,
})

#: Testnets, including local development chains
TESTNET: FrozenSet[NamedChain] = _from_allow_list(TESTNET_CHAINS)

#: Chains without EIP-1559 support
LEGACY: FrozenSet[NamedChain] = _from_allow_list(LEGACY_CHAINS)

#: Chains that have activated the Shanghai hardfork
SHANGHAI: FrozenSet[NamedChain] = _from_allow_list(SHANGHAI_CHAINS)

#: Family name -> members, as reported by :py:func:`get_families`
FAMILIES = {
    "ethereum": ETHEREUM,
    "optimism": OPTIMISM,
    "arbitrum": ARBITRUM,
    "polygon": POLYGON,
    "gnosis": GNOSIS,
    "elastic": ELASTIC,
    "dev": DEV,
    "testnet": TESTNET,
    "legacy": LEGACY,
    "shanghai": SHANGHAI,
}


def _as_named(chain: Union[Chain, NamedChain, int]) -> Optional[NamedChain]:
    assert not isinstance(chain, bool), f"Got bool {chain}"
    if isinstance(chain, NamedChain):
        return chain
    assert isinstance(chain, (Chain, int)), f"Expected Chain, NamedChain or int, got {type(chain)}"
    return lookup_by_id(int(chain))


def _is_member(chain: Union[Chain, NamedChain, int], family: FrozenSet[NamedChain]) -> bool:
    named = _as_named(chain)
    return named is not None and named in family


def is_ethereum(chain: Union[Chain, NamedChain, int]) -> bool:
    """Ethereum mainnet or one of its testnets."""
    return _is_member(chain, ETHEREUM)


def is_optimism(chain: Union[Chain, NamedChain, int]) -> bool:
    """Chain runs on OP stack."""
    return _is_member(chain, OPTIMISM)


def is_arbitrum(chain: Union[Chain, NamedChain, int]) -> bool:
    return _is_member(chain, ARBITRUM)


def is_polygon(chain: Union[Chain, NamedChain, int]) -> bool:
    return _is_member(chain, POLYGON)


def is_gnosis(chain: Union[Chain, NamedChain, int]) -> bool:
    return _is_member(chain, GNOSIS)


def is_elastic(chain: Union[Chain, NamedChain, int]) -> bool:
    """Chain is a part of the ZKsync elastic network."""
    return _is_member(chain, ELASTIC)


def is_dev(chain: Union[Chain, NamedChain, int]) -> bool:
    """Local development chain like Anvil."""
    return _is_member(chain, DEV)


def is_testnet(chain: Union[Chain, NamedChain, int]) -> bool:
    return _is_member(chain, TESTNET)


def is_legacy(chain: Union[Chain, NamedChain, int]) -> bool:
    """Chain does not support EIP-1559 transactions.

    Unknown chains are assumed to support EIP-1559.
    """
    return _is_member(chain, LEGACY)


def supports_shanghai(chain: Union[Chain, NamedChain, int]) -> bool:
    """Chain supports the PUSH0 opcode introduced in the Shanghai hardfork.

    Matters when deploying contracts compiled with Solidity 0.8.20 or later.
    Unknown chains are assumed not to support it.
    """
    return _is_member(chain, SHANGHAI)


def get_families(chain: Union[Chain, NamedChain, int]) -> Set[str]:
    """Get the names of all families a chain belongs to.

    :return:
        Empty set for chains not in the registry
    """
    named = _as_named(chain)
    if named is None:
        return set()
    return {name for name, members in FAMILIES.items() if named in members}
