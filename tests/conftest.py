from typing import Any

import pytest

from ethcommon import Common, Dataset, default_dataset

MAINNET_GENESIS = (
    "0xd4e56740f876aef8c010b86a40d5f56745a118d0906a34e69aec8c0db1cb8fa3"
)


def small_chain(**overrides: Any) -> dict[str, Any]:
    """A mainnet-like chain with four hardforks, the last unscheduled."""
    chain = {
        "name": "mainnet",
        "chainId": 1,
        "networkId": 1,
        "genesis": {
            "hash": MAINNET_GENESIS,
            "timestamp": None,
            "gasLimit": 5000,
            "difficulty": 17179869184,
            "nonce": "0x0000000000000042",
            "extraData": "0x",
            "stateRoot": "0x"
        },
        "hardforks": [
            {"name": "chainstart", "block": 0},
            {"name": "homestead", "block": 1150000},
            {"name": "byzantium", "block": 4370000},
            {"name": "istanbul", "block": None}
        ],
        "bootstrapNodes": [],
        "consensus": {"type": "pow", "algorithm": "ethash", "ethash": {}}
    }
    chain.update(overrides)
    return chain


def small_tables() -> dict[str, Any]:
    return {
        "chains": [small_chain()],
        "hardforks": [
            {
                "name": "chainstart",
                "gasConfig": {"minGasLimit": {"v": 5000}},
                "gasPrices": {
                    "sstoreSet": {"v": 20000, "d": "ignored"},
                    "sload": {"v": 50}
                },
                "vm": {},
                "pow": {}
            },
            {
                "name": "homestead",
                "gasConfig": {},
                "gasPrices": {"delegatecall": {"v": 40}},
                "vm": {},
                "pow": {}
            },
            {
                "name": "byzantium",
                "gasConfig": {},
                "gasPrices": {"sstoreSet": {"v": 200}},
                "vm": {},
                "pow": {}
            },
            {"name": "istanbul", "eips": [9996]}
        ],
        "eips": {
            9996: {
                "minimumHardfork": "byzantium",
                "gasConfig": {},
                "gasPrices": {"sload": {"v": 800}},
                "vm": {},
                "pow": {}
            },
            9997: {
                "minimumHardfork": "chainstart",
                "gasConfig": {},
                "gasPrices": {"sstoreSet": {"v": 600}},
                "vm": {},
                "pow": {}
            },
            9998: {
                "minimumHardfork": "byzantium",
                "gasConfig": {},
                "gasPrices": {},
                "vm": {},
                "pow": {}
            },
            9999: {
                "minimumHardfork": "chainstart",
                "gasConfig": {},
                "gasPrices": {"sstoreSet": {"v": 500}},
                "vm": {},
                "pow": {}
            }
        }
    }


@pytest.fixture
def small_dataset() -> Dataset:
    return Dataset.from_dict(small_tables())


@pytest.fixture
def dataset() -> Dataset:
    return default_dataset()


@pytest.fixture
def mainnet(dataset: Dataset) -> Common:
    return Common("mainnet", dataset=dataset)


@pytest.fixture
def small(small_dataset: Dataset) -> Common:
    return Common("mainnet", hardfork="byzantium", dataset=small_dataset)
