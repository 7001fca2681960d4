#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""A implementation of Ethereum Improvement Proposals EIP-2124.

FORK_HASH is the IEEE CRC32 checksum of the genesis hash followed by the
block numbers of all hardforks applied so far, each as a big-endian
uint64. FORK_NEXT is the block number of the next scheduled hardfork, or
0 if none is known.

See: https://github.com/ethereum/EIPs/blob/master/EIPS/eip-2124.md
"""

__author__ = "XiaoHuiHui"

import zlib
from typing import Optional

from . import config as opts
from . import timeline
from .datatypes import Chain, ForkID, Hardfork
from .exceptions import NoForkHashError


def calc_fork_hash(chain: Chain, hardfork: str) -> str:
    bs = [chain.genesis.hash_bytes()]
    prev_block: Optional[int] = 0
    for hf in chain.hardforks:
        block = hf.block
        # Skip chainstart (0), not applied hardforks (None) and hardforks
        # applied on the same block as the previous one
        if block is not None and block != 0 and block != prev_block:
            bs.append(int.to_bytes(
                block, opts.FORK_BLOCK_LENGTH, "big", signed=False
            ))
        if hf.name == hardfork:
            break
        prev_block = block
    checksum = zlib.crc32(b"".join(bs))
    return f"0x{checksum:0{opts.FORK_HASH_LENGTH * 2}x}"


def fork_hash(chain: Chain, hardfork: str) -> str:
    """Return the fork hash of a hardfork.

    A fork hash shipped with the chain table is returned as is.

    :param Chain chain: The chain.
    :param str hardfork: Hardfork name.
    :return str: Fork hash as 0x-prefixed hex string.
    :raise UnknownHardforkError: If the chain has no such hardfork.
    :raise NoForkHashError: If the hardfork is not applied on the chain.
    """
    data = timeline.get_hardfork(chain, hardfork)
    if data.block is None:
        raise NoForkHashError(hardfork, chain.name)
    if data.fork_hash is not None:
        return data.fork_hash
    return calc_fork_hash(chain, hardfork)


def hardfork_for_fork_hash(chain: Chain, fork_hash: str) -> Optional[Hardfork]:
    """Return the hardfork a fork hash belongs to.

    Records without a shipped fork hash are compared with the calculated
    one, unscheduled records never match.

    :param Chain chain: The chain.
    :param str fork_hash: Fork hash as 0x-prefixed hex string.
    :return Hardfork: The single matching hardfork, None if no hardfork or
        more than one hardfork has this hash.
    """
    matches = []
    for hf in chain.hardforks:
        if hf.block is None:
            continue
        hash = hf.fork_hash
        if hash is None:
            hash = calc_fork_hash(chain, hf.name)
        if hash == fork_hash:
            matches.append(hf)
    return matches[0] if len(matches) == 1 else None


def fork_id(chain: Chain, hardfork: str) -> ForkID:
    hash = bytes.fromhex(fork_hash(chain, hardfork)[2:])
    next = timeline.next_hardfork_block(chain, hardfork)
    return ForkID(hash, 0 if next is None else next)
