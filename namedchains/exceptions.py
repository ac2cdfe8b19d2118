"""Module for custom exceptions. This should contain base classes. Children of these base classes should be defined in the modules where they are used."""


class ChainError(Exception):
    """Base class for all chain identity errors."""


class UnknownChainName(ChainError, ValueError):
    """A string did not match any chain name, alias or numeric chain id literal."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"No such chain name: {text!r}. Use a registered chain name, an alias or a decimal chain id.")


class InvalidChainId(ChainError, ValueError):
    """Chain id was not an integer in the unsigned 64-bit range."""
