#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""Chain and hardfork parameters of Ethereum networks.

Gas costs, limits and thresholds change from one hardfork to the next and
EIPs can change them on their own. A Common object selects a chain, a
hardfork and a set of EIPs and answers which value is in force, which
hardforks are active at a block and which EIP-2124 fork id the client has
to announce to its peers.

See: https://github.com/ethereum/EIPs/blob/master/EIPS/eip-2124.md
"""

__author__ = "XiaoHuiHui"
__version__ = "1.0"

import logging
import os
from logging import FileHandler, Formatter, StreamHandler

from . import config as opts

fmt = Formatter(opts.LOG_FORMAT)
sh = StreamHandler()
sh.setFormatter(fmt)
sh.setLevel(logging.DEBUG if opts.DEBUG else logging.INFO)
handlers: list[logging.Handler] = [sh]

if opts.LOG_DIR:
    if not os.path.exists(opts.LOG_DIR):
        os.makedirs(opts.LOG_DIR)
    fh = FileHandler(
        os.path.join(opts.LOG_DIR, "ethcommon.log"), "w", encoding="utf-8"
    )
    fh.setFormatter(fmt)
    fh.setLevel(logging.DEBUG if opts.DEBUG else logging.INFO)
    handlers.append(fh)

loggers = [
    logging.getLogger("ethcommon.common"),
    logging.getLogger("ethcommon.dataset")
]

for logger in loggers:
    logger.setLevel(logging.DEBUG if opts.DEBUG else logging.INFO)
    for handler in handlers:
        logger.addHandler(handler)

from .common import Common  # noqa: E402
from .dataset import Dataset, default_dataset  # noqa: E402
from .datatypes import (BootstrapNode, Chain, Consensus, EIP,  # noqa: E402
                        EIPChanges, ForkID, GenesisBlock, Hardfork,
                        InlineChanges)
from .exceptions import (CommonError, HardforkTooOldError,  # noqa: E402
                         MissingFieldError, NoActiveHardforkError,
                         NoForkHashError, UnknownChainError, UnknownEIPError,
                         UnknownHardforkError, UnknownTopicError,
                         UnsupportedHardforkError)

__all__ = [
    "Common",
    "Dataset",
    "default_dataset",
    "BootstrapNode",
    "Chain",
    "Consensus",
    "EIP",
    "EIPChanges",
    "ForkID",
    "GenesisBlock",
    "Hardfork",
    "InlineChanges",
    "CommonError",
    "HardforkTooOldError",
    "MissingFieldError",
    "NoActiveHardforkError",
    "NoForkHashError",
    "UnknownChainError",
    "UnknownEIPError",
    "UnknownHardforkError",
    "UnknownTopicError",
    "UnsupportedHardforkError"
]
