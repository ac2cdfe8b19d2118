"""Chain-agnostic chain and address identifiers.

The same smart contract address can exist on multiple chains,
so an address alone does not identify a contract.

- CAIP-2 chain ids: `eip155:1`

- CAIP-10 account ids: `eip155:1:0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc`

- Naive tuples we use in URLs and configuration: `1:0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc`

For more information see the `CAIP project <https://github.com/ChainAgnostic/CAIPs>`_.
"""

from dataclasses import dataclass
from typing import Union

from eth_utils import is_checksum_address

from namedchains.chain import Chain
from namedchains.exceptions import ChainError, InvalidChainId
from namedchains.named import NamedChain
from namedchains.types import ChecksumAddress


#: CAIP-2 namespace of EVM chains
EIP155_NAMESPACE = "eip155"


class BadChainAddressTuple(ChainError):
    """Something was wrong with the constructed chain - address tuple."""


class InvalidChecksum(BadChainAddressTuple):
    """Ethereum checksum of the address is invalid"""


def _parse_chain_reference(v: str) -> Chain:
    # CAIP-2 references are decimal, no sign, no leading zeroes
    if not v.isdecimal() or not v.isascii() or (len(v) > 1 and v.startswith("0")):
        raise InvalidChainId(f"Invalid chain id reference {v!r}")
    return Chain(int(v))


def format_caip2(chain: Union[Chain, NamedChain, int]) -> str:
    """Format a chain as a CAIP-2 chain id.

    Example: `eip155:42161` for Arbitrum One.
    """
    return f"{EIP155_NAMESPACE}:{int(chain)}"


def parse_caip2(v: str) -> Chain:
    """Parse CAIP-2 chain id.

    Only the `eip155` namespace is supported.

    :raise InvalidChainId:
        Not an `eip155` chain id
    """
    assert type(v) == str

    namespace, sep, reference = v.partition(":")
    if not sep or namespace != EIP155_NAMESPACE:
        raise InvalidChainId(f"Not an EIP-155 CAIP-2 chain id: {v!r}")

    return _parse_chain_reference(reference)


@dataclass(frozen=True)
class ChainAddressTuple:
    """Present one chain-agnostic address."""

    #: The chain the address lives on
    chain: Chain

    #: Checksummed address
    address: ChecksumAddress

    @property
    def chain_id(self) -> int:
        return self.chain.id

    def format_naive(self) -> str:
        return f"{self.chain.id}:{self.address}"

    def format_caip10(self) -> str:
        return f"{format_caip2(self.chain)}:{self.address}"

    @staticmethod
    def _from_parts(chain_part: str, address: str) -> "ChainAddressTuple":
        if not is_checksum_address(address):
            raise InvalidChecksum(f"Address checksum or format invalid: {address}")

        try:
            chain = _parse_chain_reference(chain_part)
        except InvalidChainId as e:
            raise BadChainAddressTuple(f"Invalid chain id {chain_part!r}") from e

        return ChainAddressTuple(chain, address)

    @staticmethod
    def parse_naive(v: str) -> "ChainAddressTuple":
        """Parses chain_id and EVM address tuple.

        Example tuple: `1:0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc` - ETH-USDC on Uniswap v2
        """
        assert type(v) == str

        if not v:
            raise BadChainAddressTuple("Empty string passed")

        parts = v.split(":")

        if len(parts) != 2:
            raise BadChainAddressTuple(f"Cannot split chain id in address {v}")

        return ChainAddressTuple._from_parts(parts[0], parts[1])

    @staticmethod
    def parse_caip10(v: str) -> "ChainAddressTuple":
        """Parses CAIP-10 account id.

        Example: `eip155:1:0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc`
        """
        assert type(v) == str

        parts = v.split(":")

        if len(parts) != 3:
            raise BadChainAddressTuple(f"Not a CAIP-10 account id: {v}")

        if parts[0] != EIP155_NAMESPACE:
            raise BadChainAddressTuple(f"Unsupported CAIP-2 namespace {parts[0]} in {v}")

        return ChainAddressTuple._from_parts(parts[1], parts[2])


def parse_caip10(v: str) -> ChainAddressTuple:
    return ChainAddressTuple.parse_caip10(v)
