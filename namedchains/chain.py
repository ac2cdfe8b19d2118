"""Chain identifier.

See :py:class:`Chain`.
"""

import datetime
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple

from namedchains.exceptions import InvalidChainId
from namedchains.named import ChainRecord, NamedChain, lookup_by_id
from namedchains.types import MAX_CHAIN_ID, EnvironmentVariableName, URL


def _as_chain_id(value) -> Optional[int]:
    """Get the integer chain id from something comparable with a chain."""
    if isinstance(value, Chain):
        return value.id
    if isinstance(value, int) and not isinstance(value, bool):
        return int(value)
    return None


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Chain:
    """Any EVM chain, named or not.

    A chain is fully described by its EIP-155 numeric chain id.
    Chains in the registry have metadata available,
    see :py:class:`namedchains.named.NamedChain`,
    other chain ids are equally valid, just without metadata.

    Equality, hashing and ordering use the numeric id only,
    and work against plain integers and named chains in both directions:

    .. code-block:: python

        assert Chain(1) == 1 == NamedChain.mainnet
        assert Chain(NamedChain.mainnet) == Chain(1)
        assert hash(Chain(1)) == hash(1)
        assert Chain(1) < Chain(10)
    """

    #: EIP-155 chain id, unsigned 64-bit
    id: int

    def __post_init__(self):
        value = self.id
        if isinstance(value, NamedChain):
            object.__setattr__(self, "id", int(value))
            return

        if type(value) == bool or not isinstance(value, int):
            raise InvalidChainId(f"Chain id must be an integer, got {type(value)}: {value!r}")

        if not (0 <= value <= MAX_CHAIN_ID):
            raise InvalidChainId(f"Chain id {value} is outside the unsigned 64-bit range")

        # int subclasses are stored as plain ints
        object.__setattr__(self, "id", int(value))

    def __eq__(self, other) -> bool:
        other_id = _as_chain_id(other)
        if other_id is None:
            return NotImplemented
        return self.id == other_id

    def __lt__(self, other) -> bool:
        other_id = _as_chain_id(other)
        if other_id is None:
            return NotImplemented
        return self.id < other_id

    def __hash__(self):
        return hash(self.id)

    def __int__(self):
        return self.id

    def __index__(self):
        return self.id

    def __str__(self):
        return self.get_name()

    def __repr__(self):
        named = self.named
        if named is None:
            return f"<Chain #{self.id}>"
        return f"<Chain {named.get_name()} #{self.id}>"

    @property
    def named(self) -> Optional[NamedChain]:
        """The registry entry for this chain id, if any."""
        return lookup_by_id(self.id)

    def is_named(self) -> bool:
        return self.named is not None

    def get_record(self) -> Optional[ChainRecord]:
        """Get the metadata of this chain.

        :return:
            `None` for chains not in the registry
        """
        named = self.named
        if named is None:
            return None
        return named.get_record()

    def get_name(self) -> str:
        """Canonical string form.

        The display name for named chains, decimal chain id for others.
        Never an alias.
        """
        named = self.named
        if named is None:
            return str(self.id)
        return named.get_name()

    def average_blocktime_hint(self) -> Optional[datetime.timedelta]:
        named = self.named
        return named.average_blocktime_hint() if named is not None else None

    def etherscan_urls(self) -> Optional[Tuple[URL, URL]]:
        named = self.named
        return named.etherscan_urls() if named is not None else None

    def etherscan_api_key_name(self) -> Optional[EnvironmentVariableName]:
        named = self.named
        return named.etherscan_api_key_name() if named is not None else None

    def native_currency_symbol(self) -> Optional[str]:
        named = self.named
        return named.native_currency_symbol() if named is not None else None

    def is_legacy(self) -> bool:
        named = self.named
        return named.is_legacy() if named is not None else False

    def is_testnet(self) -> bool:
        named = self.named
        return named.is_testnet() if named is not None else False

    def supports_shanghai(self) -> bool:
        named = self.named
        return named.supports_shanghai() if named is not None else False

    @staticmethod
    def from_id(chain_id: int) -> "Chain":
        """Create a chain from a numeric chain id.

        Always succeeds for unsigned 64-bit values.
        """
        return Chain(chain_id)

    @staticmethod
    def from_named(named: NamedChain) -> "Chain":
        return Chain(int(NamedChain(named)))

    @staticmethod
    def mainnet() -> "Chain":
        return Chain(NamedChain.mainnet)

    @staticmethod
    def dev() -> "Chain":
        """Local development chain, chain id 1337."""
        return Chain(NamedChain.dev)
