"""Chain encodings.

- String: canonical display name or decimal id, aliases accepted on read

- JSON value: display name string for named chains, integer for others,
  for use in `dataclasses_json` classes, see :py:func:`chain_field`

- RLP: the chain id as an RLP integer

- Fixed-width: the chain id as 8 bytes, big endian

Decoding numeric forms never requires the chain to be in the registry.
"""

from dataclasses import field
from typing import Optional, Union

import rlp
from dataclasses_json import config
from marshmallow import ValidationError, fields
from rlp.exceptions import DecodingError, DeserializationError
from rlp.sedes import big_endian_int

from namedchains.chain import Chain
from namedchains.conversion import coerce_chain, parse_chain
from namedchains.exceptions import ChainError, InvalidChainId
from namedchains.named import NamedChain


#: A chain as it appears in JSON
JSONChainValue = Union[str, int]


def encode_chain_str(chain: Union[Chain, NamedChain]) -> str:
    return chain.get_name()


def decode_chain_str(text: str) -> Chain:
    """Decode the string form, aliases included.

    :raise UnknownChainName:
        The string does not resolve to a chain
    """
    return parse_chain(text)


def encode_chain_json(chain: Union[Chain, NamedChain]) -> JSONChainValue:
    """Named chains are written as their display name, others as an integer."""
    chain = coerce_chain(chain)
    if chain.is_named():
        return chain.get_name()
    return chain.id


def decode_chain_json(value: JSONChainValue) -> Chain:
    """Decode the JSON value form.

    Already decoded chains are passed through,
    as `dataclasses_json` may call decoders on loaded values.
    """
    if isinstance(value, Chain):
        return value
    if isinstance(value, str):
        return parse_chain(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidChainId(f"Cannot decode chain from JSON value {value!r}")
    return Chain(value)


class ChainField(fields.Field):
    """Marshmallow field for :py:class:`Chain` values.

    Serialises to the JSON value form, see :py:func:`encode_chain_json`.
    """

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return encode_chain_json(value)

    def _deserialize(self, value, attr, data, **kwargs):
        try:
            return decode_chain_json(value)
        except ChainError as e:
            raise ValidationError(str(e)) from e


def chain_field(default: Optional[Chain] = None):
    """Declare a :py:class:`Chain` attribute of a `dataclasses_json` class.

    .. code-block:: python

        @dataclass_json
        @dataclass
        class Deployment:
            chain: Chain = chain_field()

        Deployment.from_json('{"chain": "arbitrum"}')
    """
    return field(
        default=default,
        metadata=config(
            encoder=lambda v: encode_chain_json(v) if v is not None else None,
            decoder=lambda v: decode_chain_json(v) if v is not None else None,
            mm_field=ChainField(allow_none=True),
        )
    )


def encode_chain_rlp(chain: Union[Chain, NamedChain, int]) -> bytes:
    """Encode the chain id as an RLP integer."""
    return rlp.encode(coerce_chain(chain).id, sedes=big_endian_int)


def decode_chain_rlp(data: bytes) -> Chain:
    """Decode an RLP integer to a chain.

    :raise InvalidChainId:
        Malformed RLP, an RLP list or a value outside the unsigned 64-bit range
    """
    try:
        item = rlp.decode(data)
        if not isinstance(item, bytes):
            raise InvalidChainId(f"Expected an RLP integer, got a list: {data.hex()}")
        chain_id = big_endian_int.deserialize(item)
    except (DecodingError, DeserializationError, TypeError) as e:
        raise InvalidChainId(f"Cannot decode RLP chain id {data.hex()}") from e
    return Chain(chain_id)


def encode_chain_uint64(chain: Union[Chain, NamedChain, int]) -> bytes:
    """Encode the chain id as 8 bytes, big endian."""
    return coerce_chain(chain).id.to_bytes(8, "big")


def decode_chain_uint64(data: bytes) -> Chain:
    """Decode 8 big endian bytes to a chain.

    :raise InvalidChainId:
        Input is not exactly 8 bytes
    """
    if len(data) != 8:
        raise InvalidChainId(f"Expected 8 bytes, got {len(data)}")
    return Chain(int.from_bytes(data, "big"))
