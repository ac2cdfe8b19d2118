import pytest

from namedchains.chain import Chain
from namedchains.classification import (
    LEGACY,
    OPTIMISM,
    SHANGHAI,
    TESTNET,
    get_families,
    is_arbitrum,
    is_dev,
    is_elastic,
    is_ethereum,
    is_gnosis,
    is_legacy,
    is_optimism,
    is_polygon,
    is_testnet,
    supports_shanghai,
)
from namedchains.named import NamedChain


def test_shanghai_matches_records():
    """Flagged records and the classification set agree exactly."""
    flagged = {n for n in NamedChain if n.get_record().supports_shanghai}
    assert flagged == SHANGHAI
    for named in NamedChain:
        assert supports_shanghai(named) == (named in SHANGHAI)


def test_shanghai_not_inferred():
    """Chains that look similar to Shanghai chains are not in the set unless listed."""
    # OP stack mainnets, but Zora is not on the list
    assert is_optimism(NamedChain.zora)
    assert not supports_shanghai(NamedChain.zora)
    assert supports_shanghai(NamedChain.base)

    # Arbitrum Sepolia is listed, Arbitrum Goerli is not
    assert supports_shanghai(NamedChain.arbitrum_sepolia)
    assert not supports_shanghai(NamedChain.arbitrum_goerli)


def test_testnet_and_legacy_match_records():
    assert {n for n in NamedChain if n.is_testnet()} == TESTNET
    assert {n for n in NamedChain if n.is_legacy()} == LEGACY


def test_families():
    assert is_ethereum(NamedChain.mainnet)
    # Hoodi is a newer Ethereum testnet that has not been classified
    assert not is_ethereum(NamedChain.hoodi)
    assert not is_ethereum(NamedChain.optimism)

    assert is_optimism(NamedChain.base_sepolia)
    assert is_optimism(NamedChain.celo)
    assert not is_optimism(NamedChain.arbitrum)

    assert is_arbitrum(NamedChain.arbitrum_nova)
    assert is_polygon(NamedChain.polygon_amoy)
    assert is_gnosis(NamedChain.chiado)
    assert is_elastic(NamedChain.abstract)
    assert not is_elastic(NamedChain.linea)

    assert is_dev(NamedChain.anvil_hardhat)
    assert is_dev(NamedChain.cannon)
    assert not is_dev(NamedChain.sepolia)


def test_predicates_accept_chain_and_int():
    assert is_arbitrum(Chain(42161))
    assert is_arbitrum(42161)
    assert is_dev(31337)
    assert is_testnet(Chain(11155111))
    assert is_legacy(250)
    assert supports_shanghai(Chain(1))


def test_unnamed_chain_not_in_any_family():
    chain = Chain(999999999)
    assert not is_ethereum(chain)
    assert not is_optimism(chain)
    assert not is_testnet(chain)
    assert not is_legacy(chain)
    assert not supports_shanghai(chain)
    assert get_families(chain) == set()


def test_families_overlap():
    assert get_families(NamedChain.base_sepolia) == {"optimism", "testnet", "shanghai"}
    assert get_families(Chain(1)) == {"ethereum", "shanghai"}
    assert get_families(NamedChain.fantom) == {"legacy"}


def test_family_members_are_named_chains():
    for member in OPTIMISM:
        assert isinstance(member, NamedChain)


def test_reject_bool():
    with pytest.raises(AssertionError):
        is_ethereum(True)
