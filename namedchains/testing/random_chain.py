"""Random chains for property based tests.

Used for unit testing

- Draws registered chains and unregistered chain ids with a configurable bias

- Deterministic when seeded
"""

import random
from typing import List, Optional

from namedchains.chain import Chain
from namedchains.config import Configuration
from namedchains.named import NamedChain, lookup_by_id
from namedchains.types import MAX_CHAIN_ID


class RandomChainGenerator:
    """Produce random :py:class:`Chain` values.

    With probability `named_probability` a chain is drawn uniformly
    from the registry, otherwise a uniformly random unsigned 64-bit
    chain id that is not in the registry.

    .. code-block:: python

        gen = RandomChainGenerator(seed=1)
        for chain in gen.take(1000):
            assert parse_chain(chain_to_string(chain)) == chain
    """

    def __init__(self, seed: Optional[int] = None, named_probability: Optional[float] = None, config: Optional[Configuration] = None):
        """
        :param seed:
            Random seed. Leave `None` for a random sequence.

        :param named_probability:
            Override :py:attr:`Configuration.named_chain_probability`
        """
        if config is None:
            config = Configuration()

        if named_probability is None:
            named_probability = config.named_chain_probability

        assert 0.0 <= named_probability <= 1.0, f"Probability out of range: {named_probability}"

        self.named_probability = named_probability
        self.rng = random.Random(seed)
        self.named_chains = list(NamedChain)

    def draw_named(self) -> Chain:
        return Chain(self.rng.choice(self.named_chains))

    def draw_unnamed(self) -> Chain:
        """Draw a chain id that is not in the registry.

        The registry covers a tiny fraction of the 64-bit space,
        so retries are rare.
        """
        while True:
            chain_id = self.rng.randint(0, MAX_CHAIN_ID)
            if lookup_by_id(chain_id) is None:
                return Chain(chain_id)

    def draw(self) -> Chain:
        if self.rng.random() < self.named_probability:
            return self.draw_named()
        return self.draw_unnamed()

    def take(self, count: int) -> List[Chain]:
        return [self.draw() for _ in range(count)]
