#!/usr/bin/env python
# -*- codeing:utf-8 -*-

"""
"""

__author__ = "XiaoHuiHui"
__version__ = "1.0"

import os

# Basic config
DEBUG = os.environ.get("ETHCOMMON_DEBUG", "0").lower() in ("1", "true")
# No log file is written unless a log dir is given
LOG_DIR = os.environ.get("ETHCOMMON_LOG_DIR")
LOG_FORMAT = "%(asctime)s [%(name)s][%(levelname)s] %(message)s"
# Dataset config
DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
CHAINS = ["mainnet", "ropsten", "goerli"]
# Common config
DEFAULT_CHAIN = "mainnet"
DEFAULT_HARDFORK = "istanbul"  # used until a hardfork is set
BASELINE_HARDFORK = "chainstart"  # fallback when no hardfork is active
# Custom chain objects must carry these fields
REQUIRED_CHAIN_FIELDS = ["networkId", "genesis", "hardforks", "bootstrapNodes"]
# EIP-2124 fork id
FORK_HASH_LENGTH = 4
FORK_BLOCK_LENGTH = 8
