"""Conversions between chain ids, chain names and chains.

- Numeric chain id to :py:class:`Chain` always succeeds

- :py:class:`Chain` to string always gives the canonical display name or decimal id, never an alias

- Strings are resolved as a name or alias first, then as a decimal chain id,
  then as a `0x` prefixed hexadecimal chain id
"""

import re
from typing import Optional, Union

from namedchains.chain import Chain
from namedchains.config import Configuration
from namedchains.exceptions import InvalidChainId, UnknownChainName
from namedchains.named import NamedChain, lookup_by_name
from namedchains.types import MAX_CHAIN_ID


#: Something that can be turned to a :py:class:`Chain` with :py:func:`coerce_chain`
ChainLike = Union[Chain, NamedChain, int, str]

_DECIMAL = re.compile(r"[0-9]+")

_HEX = re.compile(r"0[xX][0-9a-fA-F]+")

_default_config = Configuration()


def chain_from_id(chain_id: int) -> Chain:
    """Numeric chain id to chain.

    :raise InvalidChainId:
        Not an unsigned 64-bit integer
    """
    return Chain(chain_id)


def chain_to_id(chain: Union[Chain, NamedChain]) -> int:
    return int(chain)


def chain_to_string(chain: Union[Chain, NamedChain]) -> str:
    """Canonical string form of a chain.

    Named chains give their display name exactly as declared,
    others their decimal chain id.
    """
    return chain.get_name()


def parse_chain(text: str, config: Optional[Configuration] = None) -> Chain:
    """Parse a chain from a string.

    Accepts, in this order

    - display names and aliases, case-insensitive

    - decimal chain ids, e.g. `"42161"`

    - hexadecimal chain ids with `0x` prefix, e.g. `"0xa4b1"`,
      unless disabled in `config`

    Whitespace is not stripped.

    :raise UnknownChainName:
        The string does not resolve to a chain
    """
    assert type(text) == str, f"Expected str, got {type(text)}"

    if config is None:
        config = _default_config

    named = lookup_by_name(text)
    if named is not None:
        return Chain(named)

    if _DECIMAL.fullmatch(text):
        chain_id = int(text)
    elif config.accept_hex_chain_ids and _HEX.fullmatch(text):
        chain_id = int(text, 16)
    else:
        raise UnknownChainName(text)

    if chain_id > MAX_CHAIN_ID:
        raise UnknownChainName(text)

    return Chain(chain_id)


def coerce_chain(value: ChainLike) -> Chain:
    """Turn anything chain-like to a :py:class:`Chain`.

    :raise UnknownChainName:
        Unparseable string

    :raise InvalidChainId:
        Not a chain-like value
    """
    if isinstance(value, Chain):
        return value
    if isinstance(value, str):
        return parse_chain(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Chain(value)
    raise InvalidChainId(f"Cannot make a chain out of {type(value)}: {value!r}")
