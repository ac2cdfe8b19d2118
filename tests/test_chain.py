import dataclasses
import datetime

import pytest

from namedchains.chain import Chain
from namedchains.exceptions import ChainError, InvalidChainId
from namedchains.named import NamedChain


def test_named_and_numeric_are_equal():
    named = Chain(NamedChain.mainnet)
    numeric = Chain(1)
    assert named == numeric
    assert hash(named) == hash(numeric)
    assert not (named < numeric)
    assert not (named > numeric)
    assert named <= numeric
    assert type(named.id) is int


def test_compare_with_int_and_named_chain():
    chain = Chain(1)
    assert chain == 1
    assert 1 == chain
    assert chain == NamedChain.mainnet
    assert NamedChain.mainnet == chain
    assert chain != 2
    assert 2 != chain
    assert chain != "1"
    assert chain != 1.0
    assert hash(chain) == hash(1) == hash(NamedChain.mainnet)


def test_ordering():
    assert Chain(1) < Chain(10)
    assert Chain(10) > NamedChain.mainnet
    assert 1 < Chain(2)
    assert Chain(2) >= 2
    assert sorted([Chain(42161), Chain(10), Chain(NamedChain.mainnet)]) == [1, 10, 42161]

    with pytest.raises(TypeError):
        Chain(1) < "2"


def test_set_and_dict_keys():
    chains = {Chain(1), Chain(NamedChain.mainnet), Chain(10)}
    assert len(chains) == 2
    assert 1 in chains
    assert NamedChain.optimism in chains

    lookup = {Chain(8453): "base"}
    assert lookup[Chain(NamedChain.base)] == "base"
    assert lookup[8453] == "base"


def test_immutable():
    chain = Chain(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        chain.id = 2


@pytest.mark.parametrize("value", [-1, 2**64, True, False, "1", 1.0, None])
def test_invalid_chain_id(value):
    with pytest.raises(InvalidChainId):
        Chain(value)


def test_invalid_chain_id_is_value_error():
    with pytest.raises(ValueError):
        Chain(-1)
    with pytest.raises(ChainError):
        Chain(-1)


def test_u64_range_edges():
    assert Chain(0).id == 0
    assert Chain(2**64 - 1).id == 2**64 - 1


def test_named_chain_metadata():
    chain = Chain(42161)
    assert chain.is_named()
    assert chain.named == NamedChain.arbitrum
    assert chain.get_record().internal_id == "Arbitrum"
    assert chain.get_name() == "arbitrum"
    assert str(chain) == "arbitrum"
    assert repr(chain) == "<Chain arbitrum #42161>"
    assert chain.average_blocktime_hint() == datetime.timedelta(milliseconds=260)
    assert chain.etherscan_urls() == ("https://api.etherscan.io/v2/api?chainid=42161", "https://arbiscan.io")
    assert chain.etherscan_api_key_name() == "ETHERSCAN_API_KEY"
    assert chain.native_currency_symbol() is None
    assert not chain.is_legacy()
    assert not chain.is_testnet()
    assert chain.supports_shanghai()


def test_unnamed_chain():
    chain = Chain(999999999)
    assert not chain.is_named()
    assert chain.named is None
    assert chain.get_record() is None
    assert chain.id == 999999999
    assert chain.get_name() == "999999999"
    assert repr(chain) == "<Chain #999999999>"
    assert chain.average_blocktime_hint() is None
    assert chain.etherscan_urls() is None
    assert chain.etherscan_api_key_name() is None
    assert chain.native_currency_symbol() is None
    assert not chain.is_legacy()
    assert not chain.is_testnet()
    assert not chain.supports_shanghai()


def test_int_conversion():
    chain = Chain(NamedChain.polygon)
    assert int(chain) == 137
    assert [10, 20, 30, 40][Chain(2)] == 30
    assert hex(Chain(42161)) == "0xa4b1"


def test_constructors():
    assert Chain.from_id(1) == NamedChain.mainnet
    assert Chain.from_named(NamedChain.base) == 8453
    assert Chain.mainnet() == 1
    assert Chain.dev() == 1337
    assert Chain.dev().get_name() == "dev"


def test_every_named_chain_round_trips_through_id():
    for named in NamedChain:
        chain = Chain(named)
        assert Chain.from_id(chain.id) == chain
        assert chain.named is named
