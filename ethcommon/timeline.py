#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""Queries over the hardfork switches of a chain.

The activation order of the hardforks is their position in the chain
table. Positions are looked up on every query, nothing is cached.
"""

__author__ = "XiaoHuiHui"

from typing import Optional, Sequence

from .datatypes import Chain, Hardfork
from .exceptions import NoActiveHardforkError, UnknownHardforkError


def hardforks(chain: Chain) -> tuple[Hardfork, ...]:
    return chain.hardforks


def get_hardfork(chain: Chain, name: str) -> Hardfork:
    for hf in chain.hardforks:
        if hf.name == name:
            return hf
    raise UnknownHardforkError(name, chain.name)


def hardfork_index(sequence: Sequence[Hardfork], name: str) -> int:
    """Return the position of a hardfork in ``sequence`` or -1."""
    position = -1
    for index, hf in enumerate(sequence):
        if hf.name == name:
            position = index
    return position


def active_hardforks(
    chain: Chain,
    block_number: Optional[int] = None,
    supported: Optional[Sequence[str]] = None
) -> list[Hardfork]:
    """Return the hardforks applied on the chain.

    :param Chain chain: The chain.
    :param int block_number: Only the hardforks applied up to this block
        if given, otherwise those of the whole chain.
    :param Sequence[str] supported: If given and not empty, skip the
        hardforks not listed in it.
    :return list[Hardfork]: The active hardforks in activation order.
    """
    result: list[Hardfork] = []
    for hf in chain.hardforks:
        if hf.block is None:
            continue
        if block_number is not None and block_number < hf.block:
            break
        if supported and hf.name not in supported:
            continue
        result.append(hf)
    return result


def active_hardfork(
    chain: Chain,
    block_number: Optional[int] = None,
    supported: Optional[Sequence[str]] = None
) -> str:
    hfs = active_hardforks(chain, block_number, supported)
    if not hfs:
        raise NoActiveHardforkError(chain.name, block_number)
    return hfs[-1].name


def hardfork_block(chain: Chain, name: str) -> Optional[int]:
    return get_hardfork(chain, name).block


def next_hardfork_block(chain: Chain, name: str) -> Optional[int]:
    """Return the first block after the one of ``name`` at which another
    hardfork is applied, or None if no such hardfork is scheduled.

    If several hardforks share that block the first one in the table is
    taken, which makes no difference to the returned number.
    """
    block = hardfork_block(chain, name)
    if block is None:
        return None
    next_block: Optional[int] = None
    for hf in chain.hardforks:
        if hf.block is None or hf.block <= block:
            continue
        if next_block is None or hf.block < next_block:
            next_block = hf.block
    return next_block


def is_active_on_chain(chain: Chain, name: str) -> bool:
    for hf in chain.hardforks:
        if hf.name == name and hf.block is not None:
            return True
    return False
