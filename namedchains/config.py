"""Parsing and test data generation options."""

from dataclasses import dataclass

from dataclasses_json import dataclass_json


@dataclass_json
@dataclass
class Configuration:
    """Options for chain parsing and random chain generation.

    There is no global configuration. Pass an instance explicitly
    to the functions that take one, or use the defaults.

    Can be read from a JSON file:

    .. code-block:: python

        with open("chains.json", "rt") as inp:
            config = Configuration.from_json(inp.read())
    """

    #: Accept `0x` prefixed hexadecimal chain ids in :py:func:`namedchains.conversion.parse_chain`
    accept_hex_chain_ids: bool = True

    #: How often :py:class:`namedchains.testing.random_chain.RandomChainGenerator`
    #: draws a named chain instead of a random chain id
    named_chain_probability: float = 0.5

    def __post_init__(self):
        assert 0.0 <= self.named_chain_probability <= 1.0, f"Probability out of range: {self.named_chain_probability}"
