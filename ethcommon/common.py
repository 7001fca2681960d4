#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""A implementation of the Common class to access chain and hardfork
parameters.

A Common instance holds the selected chain, the hardfork parameters are
read for, the hardforks it accepts and the active EIPs. Every setter
checks the complete new state before it is stored, so a failed call
leaves the instance as it was.
"""

__author__ = "XiaoHuiHui"

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from . import config as opts
from . import forkhash, params, timeline
from .dataset import Dataset, default_dataset
from .datatypes import BootstrapNode, Chain, ForkID, GenesisBlock, Hardfork
from .exceptions import (HardforkTooOldError, MissingFieldError,
                         UnknownHardforkError, UnsupportedHardforkError)

logger = logging.getLogger("ethcommon.common")

ChainSelector = Union[str, int, Chain, Mapping[str, Any]]


class Common:
    """Common class to access chain and hardfork parameters.

    :param ChainSelector chain: Chain name ('mainnet'), chain id (1), a
        Chain or a dictionary of chain parameters for a private network.
    :param str hardfork: Hardfork to read parameters for, 'istanbul' if
        not given.
    :param Sequence[str] supported_hardforks: Limit parameter returns to
        the given hardforks.
    :param Sequence[int] eips: EIPs to activate, e.g. [2537].
    :param Dataset dataset: Tables to read, the bundled ones if not given.
    """
    def __init__(
        self,
        chain: ChainSelector,
        hardfork: Optional[str] = None,
        supported_hardforks: Optional[Sequence[str]] = None,
        eips: Optional[Sequence[int]] = None,
        dataset: Optional[Dataset] = None
    ) -> None:
        self.dataset = dataset if dataset is not None else default_dataset()
        self._supported_hardforks: tuple[str, ...] = \
            tuple(supported_hardforks or ())
        self._chain = self._resolve_chain(chain)
        self._hardfork = opts.DEFAULT_HARDFORK
        self._eips: tuple[int, ...] = ()
        if hardfork:
            self.set_hardfork(hardfork)
        if eips:
            self.set_eips(eips)

    @classmethod
    def for_custom_chain(
        cls,
        base_chain: str | int,
        custom_params: Mapping[str, Any],
        hardfork: Optional[str] = None,
        supported_hardforks: Optional[Sequence[str]] = None,
        dataset: Optional[Dataset] = None
    ) -> "Common":
        """Create a Common for a custom chain based on a standard one.

        All parameters of ``base_chain`` are used except the top-level
        ones overridden in ``custom_params``.
        """
        if dataset is None:
            dataset = default_dataset()
        chain_params = dataset.chain(base_chain).to_dict()
        chain_params.update(custom_params)
        return cls(
            chain_params,
            hardfork=hardfork,
            supported_hardforks=supported_hardforks,
            dataset=dataset
        )

    def _resolve_chain(self, chain: ChainSelector) -> Chain:
        if isinstance(chain, Chain):
            return chain
        if isinstance(chain, (str, int)):
            return self.dataset.chain(chain)
        if isinstance(chain, Mapping):
            for field in opts.REQUIRED_CHAIN_FIELDS:
                if field not in chain:
                    raise MissingFieldError(field)
            return Chain.from_dict(chain)
        raise TypeError(f"Wrong input format: {type(chain).__name__}.")

    def set_chain(self, chain: ChainSelector) -> Chain:
        """Set the chain.

        :param ChainSelector chain: Chain name, chain id, a Chain or a
            dictionary of chain parameters for a private network.
        :return Chain: The chain set.
        :raise UnknownChainError: If the name or id is unknown.
        :raise MissingFieldError: If a dictionary lacks a required field.
        """
        self._chain = self._resolve_chain(chain)
        logger.debug(f"Chain set to {self._chain.name}.")
        return self._chain

    def set_hardfork(self, hardfork: str) -> None:
        """Set the hardfork to read parameters for.

        The active EIPs must stay valid on the new hardfork.

        :param str hardfork: Hardfork name.
        :raise UnsupportedHardforkError: If the hardfork is not supported.
        :raise UnknownHardforkError: If the hardfork has no parameters.
        :raise HardforkTooOldError: If the hardfork is before the minimum
            hardfork of an active EIP.
        """
        if not self._is_supported_hardfork(hardfork):
            raise UnsupportedHardforkError(
                hardfork, self._supported_hardforks
            )
        if not self.dataset.has_hardfork(hardfork):
            raise UnknownHardforkError(hardfork, self._chain.name)
        self._check_eips(hardfork, self._eips)
        if hardfork != self._hardfork:
            logger.debug(
                f"Hardfork changed from {self._hardfork} to {hardfork}."
            )
        self._hardfork = hardfork

    def set_hardfork_by_block_number(self, block_number: int) -> str:
        """Set the hardfork active on the given block.

        :param int block_number: Block number.
        :return str: The name of the hardfork set.
        """
        hfs = timeline.active_hardforks(self._chain, block_number)
        hardfork = hfs[-1].name if hfs else opts.BASELINE_HARDFORK
        self.set_hardfork(hardfork)
        return hardfork

    def set_eips(self, eips: Sequence[int] = ()) -> None:
        """Set the active EIPs.

        Nothing is changed if one of the EIPs cannot be activated.

        :param Sequence[int] eips: EIP numbers.
        :raise UnknownEIPError: If an EIP is not in the dataset.
        :raise HardforkTooOldError: If the hardfork set is before the
            minimum hardfork of an EIP.
        """
        self._check_eips(self._hardfork, eips)
        self._eips = tuple(eips)
        logger.debug(f"Active EIPs set to {list(self._eips)}.")

    def _check_eips(self, hardfork: str, eips: Sequence[int]) -> None:
        pos = timeline.hardfork_index(self._chain.hardforks, hardfork)
        for eip in eips:
            minimum_hardfork = self.dataset.eip(eip).minimum_hardfork
            minimum_pos = timeline.hardfork_index(
                self._chain.hardforks, minimum_hardfork
            )
            if pos < minimum_pos:
                raise HardforkTooOldError(eip, hardfork, minimum_hardfork)

    def _choose_hardfork(
        self, hardfork: Optional[str] = None, only_supported: bool = True
    ) -> str:
        """Choose between the hardfork set and the one given as argument.

        :param str hardfork: Hardfork given to the calling method.
        :param bool only_supported: Reject a given hardfork which is not
            supported.
        :return str: The hardfork to use.
        """
        if not hardfork:
            return self._hardfork
        if only_supported and not self._is_supported_hardfork(hardfork):
            raise UnsupportedHardforkError(
                hardfork, self._supported_hardforks
            )
        return hardfork

    def _is_supported_hardfork(self, hardfork: Optional[str]) -> bool:
        if self._supported_hardforks:
            return hardfork in self._supported_hardforks
        return True

    def _supported_filter(self, only_supported: bool) -> tuple[str, ...]:
        return self._supported_hardforks if only_supported else ()

    def param(self, topic: str, name: str) -> Any:
        """Return a parameter for the current chain setup.

        If the parameter is present in an active EIP, the EIP always takes
        precedence. Otherwise the parameter is taken from the latest
        applied hardfork with a change on it.

        :param str topic: Parameter topic ('gasConfig', 'gasPrices', 'vm',
            'pow').
        :param str name: Parameter name (e.g. 'minGasLimit' for
            'gasConfig' topic).
        :return Any: The value requested or None if not found.
        """
        return params.param(
            self.dataset, topic, name, self._hardfork, self._eips
        )

    def param_by_hardfork(
        self, topic: str, name: str, hardfork: Optional[str] = None
    ) -> Any:
        hardfork = self._choose_hardfork(hardfork)
        return params.param_by_hardfork(self.dataset, topic, name, hardfork)

    def param_by_eip(self, topic: str, name: str, eip: int) -> Any:
        return params.param_by_eip(self.dataset, topic, name, eip)

    def param_by_block(self, topic: str, name: str, block_number: int) -> Any:
        return params.param_by_block(
            self.dataset, self._chain, topic, name, block_number
        )

    def hardfork_is_active_on_block(
        self,
        hardfork: Optional[str],
        block_number: int,
        only_supported: bool = False
    ) -> bool:
        hardfork = self._choose_hardfork(hardfork, only_supported)
        block = self.hardfork_block(hardfork)
        return block is not None and block_number >= block

    def active_on_block(
        self, block_number: int, only_supported: bool = False
    ) -> bool:
        return self.hardfork_is_active_on_block(
            None, block_number, only_supported
        )

    def hardfork_gte_hardfork(
        self,
        hardfork1: Optional[str],
        hardfork2: str,
        only_active: bool = False,
        only_supported: Optional[bool] = None
    ) -> bool:
        """Sequence based check if given or set hardfork1 is greater than
        or equal to hardfork2.

        A given hardfork1 has to be supported unless ``only_supported`` is
        explicitly False. A name missing from the compared sequence sits
        at position -1.

        :param str hardfork1: Hardfork name or None for the hardfork set.
        :param str hardfork2: Hardfork name.
        :param bool only_active: Compare positions among the active
            hardforks only.
        :param bool only_supported: Compare positions among the supported
            hardforks only.
        :return bool: True if hardfork1 is greater than or equal to
            hardfork2.
        """
        hardfork1 = self._choose_hardfork(
            hardfork1, only_supported is not False
        )
        if only_active:
            hfs: Sequence[Hardfork] = timeline.active_hardforks(
                self._chain, None, self._supported_filter(bool(only_supported))
            )
        else:
            hfs = self._chain.hardforks
        pos1 = timeline.hardfork_index(hfs, hardfork1)
        pos2 = timeline.hardfork_index(hfs, hardfork2)
        return pos1 >= pos2

    def gte_hardfork(
        self,
        hardfork: str,
        only_active: bool = False,
        only_supported: Optional[bool] = None
    ) -> bool:
        return self.hardfork_gte_hardfork(
            None, hardfork, only_active, only_supported
        )

    def hardfork_is_active_on_chain(
        self, hardfork: Optional[str] = None, only_supported: bool = False
    ) -> bool:
        hardfork = self._choose_hardfork(hardfork, only_supported)
        return timeline.is_active_on_chain(self._chain, hardfork)

    def active_hardforks(
        self, block_number: Optional[int] = None, only_supported: bool = False
    ) -> list[Hardfork]:
        return timeline.active_hardforks(
            self._chain, block_number, self._supported_filter(only_supported)
        )

    def active_hardfork(
        self, block_number: Optional[int] = None, only_supported: bool = False
    ) -> str:
        return timeline.active_hardfork(
            self._chain, block_number, self._supported_filter(only_supported)
        )

    def hardfork_block(self, hardfork: Optional[str] = None) -> Optional[int]:
        hardfork = self._choose_hardfork(hardfork, False)
        return timeline.hardfork_block(self._chain, hardfork)

    def is_hardfork_block(
        self, block_number: int, hardfork: Optional[str] = None
    ) -> bool:
        return self.hardfork_block(hardfork) == block_number

    def next_hardfork_block(
        self, hardfork: Optional[str] = None
    ) -> Optional[int]:
        hardfork = self._choose_hardfork(hardfork, False)
        return timeline.next_hardfork_block(self._chain, hardfork)

    def is_next_hardfork_block(
        self, block_number: int, hardfork: Optional[str] = None
    ) -> bool:
        return self.next_hardfork_block(hardfork) == block_number

    def fork_hash(self, hardfork: Optional[str] = None) -> str:
        """Return an eth/64 compliant fork hash (EIP-2124).

        :param str hardfork: Hardfork name, the one set if not given.
        :return str: Fork hash as 0x-prefixed hex string.
        :raise NoForkHashError: If the hardfork is not applied.
        """
        hardfork = self._choose_hardfork(hardfork, False)
        return forkhash.fork_hash(self._chain, hardfork)

    def hardfork_for_fork_hash(self, fork_hash: str) -> Optional[Hardfork]:
        return forkhash.hardfork_for_fork_hash(self._chain, fork_hash)

    def fork_id(self, hardfork: Optional[str] = None) -> ForkID:
        hardfork = self._choose_hardfork(hardfork, False)
        return forkhash.fork_id(self._chain, hardfork)

    def genesis(self) -> GenesisBlock:
        return self._chain.genesis

    def hardforks(self) -> tuple[Hardfork, ...]:
        return timeline.hardforks(self._chain)

    def bootstrap_nodes(self) -> tuple[BootstrapNode, ...]:
        return self._chain.bootstrap_nodes

    def hardfork(self) -> str:
        return self._hardfork

    def chain_id(self) -> Optional[int]:
        return self._chain.chain_id

    def chain_name(self) -> str:
        return self._chain.name

    def network_id(self) -> int:
        return self._chain.network_id

    def eips(self) -> tuple[int, ...]:
        return self._eips

    def supported_hardforks(self) -> tuple[str, ...]:
        return self._supported_hardforks

    def consensus_type(self) -> Optional[str]:
        """Return the consensus type of the network, 'pow' or 'poa'."""
        if self._chain.consensus is None:
            return None
        return self._chain.consensus.type

    def consensus_algorithm(self) -> Optional[str]:
        """Return the consensus algorithm of the network, e.g. 'ethash'
        for 'pow' or 'clique' for 'poa'.
        """
        if self._chain.consensus is None:
            return None
        return self._chain.consensus.algorithm

    def consensus_config(self) -> dict[str, Any]:
        if self._chain.consensus is None:
            return {}
        return dict(self._chain.consensus.config)
