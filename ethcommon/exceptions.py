#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""Errors raised while selecting chains, hardforks and EIPs or while
resolving parameters.

Every error is a ValueError: they all mean the caller asked for something
the dataset does not allow. Each one keeps the identifying values as
attributes so callers do not have to parse the message.
"""

__author__ = "XiaoHuiHui"

from typing import Optional, Sequence


class CommonError(ValueError):
    """Base class of all errors in this package."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class UnknownChainError(CommonError):
    def __init__(self, chain: str | int) -> None:
        self.chain = chain
        if isinstance(chain, int):
            super().__init__(f"Chain with ID {chain} not supported")
        else:
            super().__init__(f"Chain with name {chain} not supported")


class UnknownHardforkError(CommonError):
    def __init__(self, hardfork: str, chain: Optional[str] = None) -> None:
        self.hardfork = hardfork
        self.chain = chain
        if chain is None:
            super().__init__(f"Hardfork with name {hardfork} not supported")
        else:
            super().__init__(
                f"Hardfork {hardfork} not defined for chain {chain}"
            )


class UnsupportedHardforkError(CommonError):
    def __init__(self, hardfork: str, supported: Sequence[str]) -> None:
        self.hardfork = hardfork
        self.supported = tuple(supported)
        super().__init__(
            f"Hardfork {hardfork} not set as supported in "
            f"supported hardforks {list(self.supported)}"
        )


class UnknownEIPError(CommonError):
    def __init__(self, eip: int) -> None:
        self.eip = eip
        super().__init__(f"EIP-{eip} not supported")


class HardforkTooOldError(CommonError):
    def __init__(self, eip: int, hardfork: str, minimum_hardfork: str) -> None:
        self.eip = eip
        self.hardfork = hardfork
        self.minimum_hardfork = minimum_hardfork
        super().__init__(
            f"EIP-{eip} cannot be activated on hardfork {hardfork}, "
            f"minimum hardfork: {minimum_hardfork}"
        )


class UnknownTopicError(CommonError):
    """Raised when a parameter source does not define a topic at all.

    ``source`` names where the lookup happened, e.g. ``"hardfork istanbul"``
    or ``"EIP-2929"``.
    """

    def __init__(self, topic: str, name: str, source: str) -> None:
        self.topic = topic
        self.name = name
        self.source = source
        super().__init__(
            f"Topic {topic} not defined in {source} (parameter {name})"
        )


class NoActiveHardforkError(CommonError):
    def __init__(self, chain: str, block_number: Optional[int] = None) -> None:
        self.chain = chain
        self.block_number = block_number
        if block_number is None:
            super().__init__(
                f"No (supported) active hardfork found on chain {chain}"
            )
        else:
            super().__init__(
                f"No (supported) active hardfork found on chain {chain} "
                f"at block {block_number}"
            )


class NoForkHashError(CommonError):
    def __init__(self, hardfork: str, chain: str) -> None:
        self.hardfork = hardfork
        self.chain = chain
        super().__init__(
            f"No fork hash calculation possible for non-applied or future "
            f"hardfork {hardfork} on chain {chain}"
        )


class MissingFieldError(CommonError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required chain parameter: {field}")
