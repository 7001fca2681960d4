#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""A implementation of the chain, hardfork and EIP tables.

A Dataset is read-only once built. The bundled tables are loaded from the
``data`` directory the first time they are needed and then shared by every
Common instance of the process.
"""

__author__ = "XiaoHuiHui"

import logging
import os
from typing import Any, Iterable, Mapping, Optional

import ujson

from . import config as opts
from .datatypes import EIP, Chain, HardforkChanges, hardfork_changes_from_dict
from .exceptions import UnknownChainError, UnknownEIPError

logger = logging.getLogger("ethcommon.dataset")

_default: Optional["Dataset"] = None


class Dataset:
    """The static tables a Common instance reads from.

    :param Iterable[Chain] chains: The known chains.
    :param Iterable[HardforkChanges] hardfork_changes: The parameter
        changes of every hardfork, in activation order.
    :param Mapping[int, EIP] eips: The known EIPs by number.
    """
    def __init__(
        self,
        chains: Iterable[Chain],
        hardfork_changes: Iterable[HardforkChanges],
        eips: Mapping[int, EIP]
    ) -> None:
        self.chains: dict[str, Chain] = {}
        self.names: dict[int, str] = {}
        for chain in chains:
            self.chains[chain.name] = chain
            if chain.chain_id is not None:
                self.names[chain.chain_id] = chain.name
        self.hardfork_changes: tuple[HardforkChanges, ...] = \
            tuple(hardfork_changes)
        self.eips: dict[int, EIP] = dict(eips)

    def chain(self, selector: str | int) -> Chain:
        """Return a chain by name or chain id.

        :param str|int selector: Chain name ('mainnet') or id (1).
        :return Chain: The chain.
        :raise UnknownChainError: If the dataset has no such chain.
        """
        if isinstance(selector, int):
            if selector not in self.names:
                raise UnknownChainError(selector)
            return self.chains[self.names[selector]]
        if selector not in self.chains:
            raise UnknownChainError(selector)
        return self.chains[selector]

    def has_hardfork(self, name: str) -> bool:
        for changes in self.hardfork_changes:
            if changes.name == name:
                return True
        return False

    def eip(self, number: int) -> EIP:
        if number not in self.eips:
            raise UnknownEIPError(number)
        return self.eips[number]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Dataset":
        """Build a dataset from the JSON layout of the tables.

        ``data`` holds ``chains`` (a list of chain objects), ``hardforks``
        (the ordered list of hardfork change objects) and ``eips`` (EIP
        objects keyed by number, as int or as decimal string).
        """
        return cls(
            [Chain.from_dict(chain) for chain in data["chains"]],
            [hardfork_changes_from_dict(hf) for hf in data["hardforks"]],
            {
                int(number): EIP.from_dict(int(number), eip)
                for number, eip in data["eips"].items()
            }
        )

    @classmethod
    def load(cls, data_dir: str = opts.DATA_DIR) -> "Dataset":
        chains = []
        for name in opts.CHAINS:
            with open(os.path.join(data_dir, "chains", f"{name}.json")) as rf:
                chains.append(ujson.load(rf))
        with open(os.path.join(data_dir, "hardforks.json")) as rf:
            hardforks = ujson.load(rf)
        with open(os.path.join(data_dir, "eips.json")) as rf:
            eips = ujson.load(rf)
        dataset = cls.from_dict(
            {"chains": chains, "hardforks": hardforks, "eips": eips}
        )
        logger.info(
            f"Loaded {len(dataset.chains)} chain(s), "
            f"{len(dataset.hardfork_changes)} hardfork(s) and "
            f"{len(dataset.eips)} EIP(s) from {data_dir}"
        )
        return dataset


def default_dataset() -> Dataset:
    """Return the bundled dataset, loading it on first use."""
    global _default
    if _default is None:
        _default = Dataset.load()
    return _default
