import pytest

from namedchains.config import Configuration
from namedchains.conversion import parse_chain
from namedchains.exceptions import UnknownChainName
from namedchains.named import NamedChain


def test_config_defaults():
    config = Configuration()
    assert config.accept_hex_chain_ids
    assert config.named_chain_probability == 0.5


def test_config_from_json():
    config = Configuration.from_json('{"accept_hex_chain_ids": false}')
    assert not config.accept_hex_chain_ids
    assert config.named_chain_probability == 0.5

    config = Configuration.from_json('{"named_chain_probability": 0.9}')
    assert config.named_chain_probability == 0.9


def test_config_bad_probability():
    with pytest.raises(AssertionError):
        Configuration(named_chain_probability=2)


def test_hex_disabled():
    config = Configuration(accept_hex_chain_ids=False)
    assert parse_chain("0xa4b1") == NamedChain.arbitrum
    with pytest.raises(UnknownChainName):
        parse_chain("0xa4b1", config=config)
    # Decimal ids always work
    assert parse_chain("42161", config=config) == NamedChain.arbitrum
