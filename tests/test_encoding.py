from dataclasses import dataclass
from typing import Optional

import pytest
from dataclasses_json import dataclass_json

from namedchains.chain import Chain
from namedchains.encoding import (
    chain_field,
    decode_chain_json,
    decode_chain_rlp,
    decode_chain_str,
    decode_chain_uint64,
    encode_chain_json,
    encode_chain_rlp,
    encode_chain_str,
    encode_chain_uint64,
)
from namedchains.exceptions import InvalidChainId, UnknownChainName
from namedchains.named import NamedChain


@dataclass_json
@dataclass
class Deployment:
    """Something that lives on a chain"""
    name: str
    chain: Optional[Chain] = chain_field()


def test_string_form():
    assert encode_chain_str(Chain(1)) == "mainnet"
    assert encode_chain_str(NamedChain.gnosis) == "xdai"
    assert encode_chain_str(Chain(999999999)) == "999999999"
    assert decode_chain_str("gnosis") == NamedChain.gnosis
    assert decode_chain_str("999999999") == 999999999

    with pytest.raises(UnknownChainName):
        decode_chain_str("nope")


def test_json_value_form():
    assert encode_chain_json(Chain(42161)) == "arbitrum"
    assert encode_chain_json(NamedChain.arbitrum) == "arbitrum"
    assert encode_chain_json(Chain(999999999)) == 999999999
    assert decode_chain_json("arbitrum-one") == 42161
    assert decode_chain_json(42161) == NamedChain.arbitrum
    assert decode_chain_json(999999999) == 999999999

    with pytest.raises(InvalidChainId):
        decode_chain_json(True)

    with pytest.raises(InvalidChainId):
        decode_chain_json(1.5)


def test_dataclass_chain_field():
    deployment = Deployment(name="vault", chain=Chain(NamedChain.base))
    assert deployment.to_dict() == {"name": "vault", "chain": "base"}
    assert Deployment.from_json(deployment.to_json()) == deployment

    unnamed = Deployment(name="vault", chain=Chain(999999999))
    assert unnamed.to_dict() == {"name": "vault", "chain": 999999999}
    assert Deployment.from_dict({"name": "vault", "chain": 999999999}) == unnamed

    # Aliases are accepted on read
    assert Deployment.from_dict({"name": "vault", "chain": "worldchain"}).chain == NamedChain.world

    assert Deployment.from_dict({"name": "vault"}).chain is None


def test_dataclass_chain_field_schema():
    schema = Deployment.schema()
    loaded = schema.load({"name": "vault", "chain": "bsc"})
    assert loaded.chain == 56
    assert schema.dump(loaded) == {"name": "vault", "chain": "bsc"}

    errors = schema.validate({"name": "vault", "chain": "no-such-chain"})
    assert "chain" in errors


def test_rlp():
    assert encode_chain_rlp(Chain(1)) == b"\x01"
    assert encode_chain_rlp(NamedChain.mainnet) == b"\x01"
    assert encode_chain_rlp(Chain(0)) == b"\x80"
    assert encode_chain_rlp(1024) == b"\x82\x04\x00"
    assert encode_chain_rlp(2**64 - 1) == b"\x88" + b"\xff" * 8

    assert decode_chain_rlp(b"\x82\x04\x00") == 1024
    assert decode_chain_rlp(b"\x01") == NamedChain.mainnet


def test_rlp_decode_does_not_need_registry():
    chain = decode_chain_rlp(encode_chain_rlp(999999999))
    assert chain.id == 999999999
    assert chain.get_record() is None


def test_rlp_decode_invalid():
    # Beyond u64
    with pytest.raises(InvalidChainId):
        decode_chain_rlp(b"\x89\x01" + b"\x00" * 8)

    # Leading zero
    with pytest.raises(InvalidChainId):
        decode_chain_rlp(b"\x82\x00\x01")

    # Empty list, not an integer
    with pytest.raises(InvalidChainId):
        decode_chain_rlp(b"\xc0")

    # List of integers
    with pytest.raises(InvalidChainId):
        decode_chain_rlp(b"\xc2\x01\x02")

    # Trailing bytes
    with pytest.raises(InvalidChainId):
        decode_chain_rlp(b"\x01\x01")


def test_uint64():
    assert encode_chain_uint64(Chain(1)) == b"\x00" * 7 + b"\x01"
    assert encode_chain_uint64(NamedChain.arbitrum) == (42161).to_bytes(8, "big")
    assert decode_chain_uint64(b"\xff" * 8).id == 2**64 - 1
    assert decode_chain_uint64(b"\x00" * 7 + b"\x01") == NamedChain.mainnet

    with pytest.raises(InvalidChainId):
        decode_chain_uint64(b"\x01")

    with pytest.raises(InvalidChainId):
        decode_chain_uint64(b"\x00" * 9)


def test_random_chains_compact_forms(random_chains):
    for chain in random_chains.take(200):
        assert decode_chain_rlp(encode_chain_rlp(chain)) == chain
        assert decode_chain_uint64(encode_chain_uint64(chain)) == chain
        assert decode_chain_json(encode_chain_json(chain)) == chain
