#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""Resolution of chain parameters.

A parameter is addressed by a topic ('gasConfig', 'gasPrices', 'vm',
'pow') and a name inside the topic. Its value is taken from the first
active EIP that sets it. Otherwise the hardfork table is walked from
chainstart up to the requested hardfork and the last value seen wins.
"""

__author__ = "XiaoHuiHui"

from typing import Any, Iterable

from . import timeline
from .dataset import Dataset
from .datatypes import Chain


def param_by_eip(dataset: Dataset, topic: str, name: str, eip: int) -> Any:
    return dataset.eip(eip).param(topic, name)


def param_by_hardfork(
    dataset: Dataset, topic: str, name: str, hardfork: str
) -> Any:
    """Return the value of a parameter as of a hardfork.

    :param Dataset dataset: The tables to read.
    :param str topic: Parameter topic.
    :param str name: Parameter name.
    :param str hardfork: Hardfork name.
    :return Any: The value, or None if no hardfork up to ``hardfork``
        sets the parameter.
    :raise UnknownTopicError: If a hardfork on the way does not define
        the topic.
    """
    value = None
    for changes in dataset.hardfork_changes:
        value = changes.apply(topic, name, value, dataset.eips)
        if changes.name == hardfork:
            break
    return value


def param(
    dataset: Dataset,
    topic: str,
    name: str,
    hardfork: str,
    eips: Iterable[int]
) -> Any:
    for eip in eips:
        value = param_by_eip(dataset, topic, name, eip)
        if value is not None:
            return value
    return param_by_hardfork(dataset, topic, name, hardfork)


def param_by_block(
    dataset: Dataset, chain: Chain, topic: str, name: str, block_number: int
) -> Any:
    hardfork = timeline.active_hardfork(chain, block_number)
    return param_by_hardfork(dataset, topic, name, hardfork)
