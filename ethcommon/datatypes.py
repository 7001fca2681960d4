#!/usr/bin/env python
# -*- codeing:utf-8 -*-
"""The data structures of chains, hardforks and EIPs.

Chain files use the camelCase JSON layout of the shared Ethereum chain
configuration tables. Every record here is an immutable NamedTuple built
from that layout with ``from_dict`` and, where a record can be handed back
to a caller as a custom chain, written back with ``to_dict``.
"""

__author__ = "XiaoHuiHui"

import ipaddress
from ipaddress import IPv4Address, IPv6Address
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple, Optional, Union

import rlp
from eth_keys.datatypes import PublicKey
from eth_keys.exceptions import ValidationError
from parse import parse

from . import config as opts
from .exceptions import UnknownEIPError, UnknownTopicError

IPAddress = IPv4Address | IPv6Address
Params = dict[str, dict[str, dict[str, Any]]]
Rlpable = list[Union[int, bytes]]

# Keys of an EIP or hardfork file that are not parameter topics
_META_KEYS = (
    "name", "number", "comment", "url", "status", "minimumHardfork", "eips"
)


def _topics(data: Mapping[str, Any]) -> Params:
    params: Params = {}
    for key, value in data.items():
        if key in _META_KEYS or not isinstance(value, dict):
            continue
        params[key] = value
    return params


class GenesisBlock(NamedTuple):
    hash: str
    timestamp: Optional[int]
    gas_limit: int
    difficulty: int
    nonce: str
    extra_data: str
    state_root: str

    def hash_bytes(self) -> bytes:
        return bytes.fromhex(self.hash[2:])

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GenesisBlock":
        return cls(
            data["hash"],
            data.get("timestamp"),
            data.get("gasLimit", 0),
            data.get("difficulty", 0),
            data.get("nonce", "0x0000000000000000"),
            data.get("extraData", "0x"),
            data.get("stateRoot", "0x")
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "hash": self.hash,
            "timestamp": self.timestamp,
            "gasLimit": self.gas_limit,
            "difficulty": self.difficulty,
            "nonce": self.nonce,
            "extraData": self.extra_data,
            "stateRoot": self.state_root
        }


class Hardfork(NamedTuple):
    """A hardfork switch of a chain.

    ``block`` is None while the hardfork is not scheduled on the chain.
    ``fork_hash`` carries the canonical EIP-2124 fork hash when the chain
    table ships one.
    """
    name: str
    block: Optional[int]
    fork_hash: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Hardfork":
        return cls(data["name"], data["block"], data.get("forkHash"))

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"name": self.name, "block": self.block}
        if self.fork_hash is not None:
            d["forkHash"] = self.fork_hash
        return d


class BootstrapNode(NamedTuple):
    """A node used to enter the peer-to-peer network of a chain."""
    ip: str
    port: int
    id: str
    location: str = ""
    comment: str = ""

    @property
    def address(self) -> IPAddress:
        return ipaddress.ip_address(self.ip)

    @property
    def public_key(self) -> PublicKey:
        return PublicKey(bytes.fromhex(self.id))

    def to_enode(self) -> str:
        if self.address.version == 4:
            return f"enode://{self.id}@{self.ip}:{self.port}"
        else:
            return f"enode://{self.id}@[{self.ip}]:{self.port}"

    @classmethod
    def from_enode(
        cls, url: str, location: str = "", comment: str = ""
    ) -> "BootstrapNode":
        result = parse("enode://{}@{}:{:d}", url)
        if result is None:
            raise ValueError(f"Invalid enode url: {url}.")
        id, ip, port = result
        ip = ip.strip("[]")
        # Validates the address and the key before accepting the node.
        ipaddress.ip_address(ip)
        try:
            PublicKey(bytes.fromhex(id))
        except ValidationError as err:
            raise ValueError(f"Invalid node id: {id}.") from err
        return cls(ip, port, id, location, comment)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | str) -> "BootstrapNode":
        if isinstance(data, str):
            return cls.from_enode(data)
        return cls(
            data["ip"],
            int(data["port"]),
            data["id"],
            data.get("location", ""),
            data.get("comment", "")
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "ip": self.ip,
            "port": self.port,
            "id": self.id,
            "location": self.location,
            "comment": self.comment
        }


class Consensus(NamedTuple):
    type: str
    algorithm: str
    config: Mapping[str, Any] = MappingProxyType({})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Consensus":
        return cls(
            data["type"],
            data["algorithm"],
            MappingProxyType(dict(data.get(data["algorithm"], {})))
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "algorithm": self.algorithm,
            self.algorithm: dict(self.config)
        }


class Chain(NamedTuple):
    name: str
    chain_id: Optional[int]
    network_id: int
    genesis: GenesisBlock
    hardforks: tuple[Hardfork, ...]
    bootstrap_nodes: tuple[BootstrapNode, ...]
    consensus: Optional[Consensus]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Chain":
        """Build a chain from its JSON layout.

        Only ``networkId``, ``genesis``, ``hardforks`` and
        ``bootstrapNodes`` are read unconditionally, the caller checks
        they are present. The values themselves are trusted.
        """
        consensus = data.get("consensus")
        return cls(
            data.get("name", "custom"),
            data.get("chainId"),
            data["networkId"],
            GenesisBlock.from_dict(data["genesis"]),
            tuple(Hardfork.from_dict(hf) for hf in data["hardforks"]),
            tuple(
                BootstrapNode.from_dict(node)
                for node in data["bootstrapNodes"]
            ),
            None if consensus is None else Consensus.from_dict(consensus)
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "name": self.name,
            "chainId": self.chain_id,
            "networkId": self.network_id,
            "genesis": self.genesis.to_dict(),
            "hardforks": [hf.to_dict() for hf in self.hardforks],
            "bootstrapNodes": [node.to_dict() for node in self.bootstrap_nodes]
        }
        if self.consensus is not None:
            d["consensus"] = self.consensus.to_dict()
        return d


class EIP(NamedTuple):
    number: int
    minimum_hardfork: str
    params: Params

    def param(self, topic: str, name: str) -> Any:
        """Return the value of a parameter changed by this EIP.

        :param str topic: Parameter topic, e.g. 'gasPrices'.
        :param str name: Parameter name, e.g. 'sstoreSet'.
        :return Any: The value, or None if the EIP does not set it.
        :raise UnknownTopicError: If the EIP does not define the topic.
        """
        if topic not in self.params:
            raise UnknownTopicError(topic, name, f"EIP-{self.number}")
        entry = self.params[topic].get(name)
        if entry is None:
            return None
        return entry["v"]

    @classmethod
    def from_dict(cls, number: int, data: Mapping[str, Any]) -> "EIP":
        return cls(number, data["minimumHardfork"], _topics(data))


class InlineChanges(NamedTuple):
    """A hardfork which lists its parameter changes itself."""
    name: str
    params: Params

    def apply(
        self, topic: str, name: str, value: Any, eips: Mapping[int, EIP]
    ) -> Any:
        if topic not in self.params:
            raise UnknownTopicError(topic, name, f"hardfork {self.name}")
        if name in self.params[topic]:
            return self.params[topic][name]["v"]
        return value


class EIPChanges(NamedTuple):
    """A hardfork made of a list of EIPs."""
    name: str
    eips: tuple[int, ...]

    def apply(
        self, topic: str, name: str, value: Any, eips: Mapping[int, EIP]
    ) -> Any:
        for number in self.eips:
            if number not in eips:
                raise UnknownEIPError(number)
            eip_value = eips[number].param(topic, name)
            if eip_value is not None:
                value = eip_value
        return value


HardforkChanges = Union[InlineChanges, EIPChanges]


def hardfork_changes_from_dict(data: Mapping[str, Any]) -> HardforkChanges:
    if "eips" in data:
        return EIPChanges(data["name"], tuple(data["eips"]))
    return InlineChanges(data["name"], _topics(data))


class ForkID(NamedTuple):
    """The EIP-2124 fork identifier exchanged in the eth Status message.

    See: https://github.com/ethereum/EIPs/blob/master/EIPS/eip-2124.md
    """
    hash: bytes
    next: int

    def to_RLP(self) -> Rlpable:
        return [self.hash, self.next]

    def encode(self) -> bytes:
        return rlp.encode(self.to_RLP())  # type: ignore

    @classmethod
    def from_RLP(cls, payload: list[bytes]) -> "ForkID":
        if len(payload[0]) != opts.FORK_HASH_LENGTH:
            raise ValueError(f"Invalid fork hash: {payload[0].hex()}.")
        return cls(
            payload[0],
            int.from_bytes(payload[1], "big", signed=False)
        )

    @classmethod
    def decode(cls, data: bytes) -> "ForkID":
        payload: list[bytes] = rlp.decode(data)  # type: ignore
        return cls.from_RLP(payload)

    def __str__(self) -> str:
        return f"ForkID(hash=0x{self.hash.hex()}, next={self.next})"
