"""Generic types used in the chain registry data model.

Types aliases are used to give human-readable meaning for various arguments and return values.
"""
from typing import TypeAlias


#: Chain id that is not a wrapped enum.
#:
#: EIP-155 chain ids are unsigned 64-bit integers.
#:
#: See :py:class:`namedchains.chain.Chain` for details
RawChainId: TypeAlias = int

#: The symbolic registry key of a named chain.
#:
#: PascalCase, stable across releases, e.g. `BinanceSmartChain`.
#: Used as `internalId` in the registry export.
InternalId: TypeAlias = str

#: Ethereum address with EIP-55 checksum.
#:
#: `See EIP-55 <https://github.com/ethereum/EIPs/blob/master/EIPS/eip-55.md>`__.
ChecksumAddress: TypeAlias = str

#: URL as a string type
#:
#: Explorer URLs never have a trailing slash.
URL: TypeAlias = str

#: Block time hints are expressed as milliseconds
Milliseconds: TypeAlias = int

#: Name of an environment variable, e.g. `ETHERSCAN_API_KEY`.
#:
#: Metadata only, we never read the variable.
EnvironmentVariableName: TypeAlias = str

#: Largest representable chain id
MAX_CHAIN_ID = 2**64 - 1
