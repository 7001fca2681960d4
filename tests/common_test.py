import pytest

from conftest import small_chain

from ethcommon import (Common, Dataset, HardforkTooOldError,
                       MissingFieldError, NoForkHashError, UnknownChainError,
                       UnknownEIPError, UnknownHardforkError,
                       UnsupportedHardforkError)
from ethcommon import config as opts


def test_chain_selection(dataset: Dataset) -> None:
    c = Common("mainnet", dataset=dataset)
    assert c.chain_name() == "mainnet"
    assert c.chain_id() == 1
    assert c.network_id() == 1
    assert c.hardfork() == opts.DEFAULT_HARDFORK
    assert Common(5, dataset=dataset).chain_name() == "goerli"
    assert c.set_chain(3).name == "ropsten"
    assert c.chain_name() == "ropsten"


def test_unknown_chain(dataset: Dataset) -> None:
    with pytest.raises(UnknownChainError) as excinfo:
        Common("foo", dataset=dataset)
    assert excinfo.value.chain == "foo"
    with pytest.raises(UnknownChainError):
        Common(999, dataset=dataset)
    with pytest.raises(TypeError):
        Common(1.5, dataset=dataset)  # type: ignore


def test_unknown_chain_keeps_state(mainnet: Common) -> None:
    with pytest.raises(UnknownChainError):
        mainnet.set_chain("foo")
    assert mainnet.chain_name() == "mainnet"


@pytest.mark.parametrize("field", opts.REQUIRED_CHAIN_FIELDS)
def test_custom_chain_missing_field(dataset: Dataset, field: str) -> None:
    chain = small_chain()
    del chain[field]
    with pytest.raises(MissingFieldError) as excinfo:
        Common(chain, dataset=dataset)
    assert excinfo.value.field == field


def test_custom_chain(small_dataset: Dataset) -> None:
    chain = small_chain(name="private", chainId=None, networkId=1337)
    del chain["consensus"]
    c = Common(chain, hardfork="homestead", dataset=small_dataset)
    assert c.chain_name() == "private"
    assert c.chain_id() is None
    assert c.network_id() == 1337
    assert c.consensus_type() is None
    assert c.consensus_algorithm() is None
    assert c.consensus_config() == {}
    assert [hf.name for hf in c.hardforks()] == \
        ["chainstart", "homestead", "byzantium", "istanbul"]


def test_for_custom_chain(dataset: Dataset) -> None:
    c = Common.for_custom_chain(
        "mainnet",
        {"name": "testnet", "chainId": 1337, "networkId": 1337},
        hardfork="byzantium",
        dataset=dataset
    )
    assert c.chain_name() == "testnet"
    assert c.chain_id() == 1337
    assert c.network_id() == 1337
    assert c.hardfork() == "byzantium"
    assert c.hardforks() == dataset.chain("mainnet").hardforks
    assert c.genesis() == dataset.chain("mainnet").genesis


def test_set_hardfork(mainnet: Common) -> None:
    mainnet.set_hardfork("byzantium")
    assert mainnet.hardfork() == "byzantium"
    with pytest.raises(UnknownHardforkError) as excinfo:
        mainnet.set_hardfork("shanghai")
    assert excinfo.value.hardfork == "shanghai"
    assert excinfo.value.chain == "mainnet"
    assert mainnet.hardfork() == "byzantium"


def test_set_unsupported_hardfork(dataset: Dataset) -> None:
    c = Common(
        "mainnet",
        hardfork="byzantium",
        supported_hardforks=["byzantium", "istanbul"],
        dataset=dataset
    )
    with pytest.raises(UnsupportedHardforkError) as excinfo:
        c.set_hardfork("berlin")
    assert excinfo.value.hardfork == "berlin"
    assert excinfo.value.supported == ("byzantium", "istanbul")
    assert c.hardfork() == "byzantium"
    assert c.supported_hardforks() == ("byzantium", "istanbul")


def test_set_hardfork_by_block_number(small: Common) -> None:
    assert small.set_hardfork_by_block_number(4370000) == "byzantium"
    assert small.hardfork() == "byzantium"
    assert small.set_hardfork_by_block_number(4369999) == "homestead"
    assert small.set_hardfork_by_block_number(0) == "chainstart"


def test_set_hardfork_by_block_number_mainnet(mainnet: Common) -> None:
    assert mainnet.set_hardfork_by_block_number(7280000) == "petersburg"
    assert mainnet.set_hardfork_by_block_number(9200000) == "muirGlacier"
    assert mainnet.set_hardfork_by_block_number(13000000) == "london"


def test_set_hardfork_by_block_number_baseline(small_dataset: Dataset) -> None:
    chain = small_chain(hardforks=[
        {"name": "chainstart", "block": None},
        {"name": "homestead", "block": 100}
    ])
    c = Common(chain, hardfork="homestead", dataset=small_dataset)
    assert c.set_hardfork_by_block_number(10) == opts.BASELINE_HARDFORK
    assert c.hardfork() == opts.BASELINE_HARDFORK


def test_set_eips(dataset: Dataset) -> None:
    c = Common("mainnet", hardfork="istanbul", eips=[2537], dataset=dataset)
    assert c.eips() == (2537,)
    assert c.param("gasPrices", "Bls12381G1AddGas") == 600
    c.set_eips([])
    assert c.eips() == ()
    assert c.param("gasPrices", "Bls12381G1AddGas") is None


def test_set_eips_hardfork_too_old(small: Common) -> None:
    small.set_hardfork("homestead")
    with pytest.raises(HardforkTooOldError) as excinfo:
        small.set_eips([9998])
    assert excinfo.value.eip == 9998
    assert excinfo.value.hardfork == "homestead"
    assert excinfo.value.minimum_hardfork == "byzantium"
    assert small.eips() == ()


def test_set_eips_commits_nothing_on_failure(small: Common) -> None:
    small.set_eips([9999])
    small.set_hardfork("homestead")
    with pytest.raises(HardforkTooOldError):
        small.set_eips([9997, 9998])
    assert small.eips() == (9999,)
    with pytest.raises(UnknownEIPError) as excinfo:
        small.set_eips([9997, 1])
    assert excinfo.value.eip == 1
    assert small.eips() == (9999,)


def test_set_hardfork_keeps_eips_valid(dataset: Dataset) -> None:
    c = Common("mainnet", hardfork="london", eips=[1559], dataset=dataset)
    with pytest.raises(HardforkTooOldError) as excinfo:
        c.set_hardfork("chainstart")
    assert excinfo.value.eip == 1559
    assert excinfo.value.hardfork == "chainstart"
    assert excinfo.value.minimum_hardfork == "berlin"
    assert c.hardfork() == "london"
    with pytest.raises(HardforkTooOldError):
        c.set_hardfork_by_block_number(9069000)
    assert c.hardfork() == "london"
    c.set_hardfork("berlin")
    assert c.hardfork() == "berlin"
    c.set_eips([])
    c.set_hardfork("chainstart")
    assert c.hardfork() == "chainstart"


def test_param(small: Common) -> None:
    assert small.param("gasPrices", "delegatecall") == 40
    assert small.param("gasPrices", "sstoreSet") == 200
    small.set_eips([9999])
    assert small.param("gasPrices", "sstoreSet") == 500
    assert small.param("gasConfig", "minGasLimit") == 5000


def test_param_by_hardfork(small: Common) -> None:
    assert small.param_by_hardfork("gasPrices", "sstoreSet") == 200
    assert small.param_by_hardfork("gasPrices", "sstoreSet", "homestead") \
        == 20000
    assert small.param_by_hardfork("gasPrices", "sload", "istanbul") == 800


def test_param_by_hardfork_unsupported(dataset: Dataset) -> None:
    c = Common(
        "mainnet",
        hardfork="byzantium",
        supported_hardforks=["byzantium", "istanbul"],
        dataset=dataset
    )
    assert c.param_by_hardfork("gasPrices", "ecAdd", "istanbul") == 150
    with pytest.raises(UnsupportedHardforkError):
        c.param_by_hardfork("gasPrices", "ecAdd", "berlin")


def test_param_by_eip_and_block(mainnet: Common) -> None:
    assert mainnet.param_by_eip("gasPrices", "basefee", 3198) == 2
    assert mainnet.param_by_block("gasPrices", "ecAdd", 4370000) == 500
    assert mainnet.param_by_block("gasPrices", "sload", 12244000) == 0


def test_hardfork_is_active_on_block(small: Common) -> None:
    assert small.hardfork_is_active_on_block("byzantium", 4370000)
    assert not small.hardfork_is_active_on_block("byzantium", 4369999)
    assert not small.hardfork_is_active_on_block("istanbul", 99999999)
    assert small.active_on_block(5000000)
    assert not small.active_on_block(1)


def test_hardfork_gte_hardfork(mainnet: Common) -> None:
    assert mainnet.gte_hardfork("byzantium")
    assert mainnet.gte_hardfork("istanbul")
    assert not mainnet.gte_hardfork("berlin")
    assert mainnet.hardfork_gte_hardfork("london", "berlin")
    assert not mainnet.hardfork_gte_hardfork("homestead", "dao")


def test_hardfork_gte_hardfork_only_active(dataset: Dataset) -> None:
    c = Common("ropsten", hardfork="byzantium", dataset=dataset)
    assert c.hardfork_gte_hardfork(
        "byzantium", "homestead", only_active=True
    )
    assert not c.hardfork_gte_hardfork(
        "homestead", "byzantium", only_active=True
    )


def test_hardfork_gte_hardfork_unsupported(dataset: Dataset) -> None:
    c = Common(
        "mainnet",
        hardfork="istanbul",
        supported_hardforks=["byzantium", "istanbul"],
        dataset=dataset
    )
    with pytest.raises(UnsupportedHardforkError):
        c.hardfork_gte_hardfork("berlin", "byzantium")
    assert c.hardfork_gte_hardfork("berlin", "byzantium", only_supported=False)
    assert c.hardfork_gte_hardfork(
        "istanbul", "byzantium", only_active=True, only_supported=True
    )


def test_hardfork_gte_hardfork_absent_name_is_ambiguous(small: Common) -> None:
    """Absent names sit at position -1, the answer is not meaningful.

    Only check that the comparison runs and returns a bool.
    """
    one_absent = small.hardfork_gte_hardfork(
        "byzantium", "istanbul", only_active=True
    )
    both_absent = small.hardfork_gte_hardfork("berlin", "london")
    assert isinstance(one_absent, bool)
    assert isinstance(both_absent, bool)


def test_hardfork_is_active_on_chain(dataset: Dataset) -> None:
    c = Common("ropsten", hardfork="homestead", dataset=dataset)
    assert c.hardfork_is_active_on_chain()
    assert c.hardfork_is_active_on_chain("london")
    assert not c.hardfork_is_active_on_chain("dao")


def test_active_hardforks(dataset: Dataset) -> None:
    c = Common(
        "mainnet",
        hardfork="byzantium",
        supported_hardforks=["byzantium", "istanbul"],
        dataset=dataset
    )
    assert len(c.active_hardforks()) == 12
    assert len(c.active_hardforks(1920000)) == 3
    assert [hf.name for hf in c.active_hardforks(only_supported=True)] == \
        ["byzantium", "istanbul"]
    assert c.active_hardfork() == "london"
    assert c.active_hardfork(only_supported=True) == "istanbul"
    assert c.active_hardfork(4370000) == "byzantium"


def test_hardfork_blocks(small: Common) -> None:
    assert small.hardfork_block() == 4370000
    assert small.hardfork_block("homestead") == 1150000
    assert small.hardfork_block("istanbul") is None
    assert small.is_hardfork_block(4370000)
    assert not small.is_hardfork_block(4370001)
    assert small.next_hardfork_block("homestead") == 4370000
    assert small.next_hardfork_block() is None
    assert small.is_next_hardfork_block(4370000, "homestead")
    assert not small.is_next_hardfork_block(4370000)


def test_fork_hash(small: Common, mainnet: Common) -> None:
    assert small.fork_hash("chainstart") == "0xfc64ec04"
    with pytest.raises(NoForkHashError):
        small.fork_hash("istanbul")
    assert mainnet.fork_hash() == "0x879d6e30"
    assert mainnet.fork_hash("london") == "0xb715077d"


def test_fork_hash_round_trip(mainnet: Common) -> None:
    hf = mainnet.hardfork_for_fork_hash(mainnet.fork_hash("byzantium"))
    assert hf is not None
    assert hf.name == "byzantium"
    assert hf.block == 4370000


def test_fork_id(mainnet: Common) -> None:
    fork_id = mainnet.fork_id()
    assert fork_id.hash == bytes.fromhex("879d6e30")
    assert fork_id.next == 9200000
    assert mainnet.fork_id("london").next == 0


def test_accessors(dataset: Dataset) -> None:
    c = Common("mainnet", dataset=dataset)
    assert c.genesis().hash == \
        "0xd4e56740f876aef8c010b86a40d5f56745a118d0906a34e69aec8c0db1cb8fa3"
    assert c.genesis().gas_limit == 5000
    assert len(c.bootstrap_nodes()) == 8
    assert c.bootstrap_nodes()[0].port == 30303
    assert c.consensus_type() == "pow"
    assert c.consensus_algorithm() == "ethash"
    goerli = Common("goerli", dataset=dataset)
    assert goerli.consensus_type() == "poa"
    assert goerli.consensus_algorithm() == "clique"
    assert goerli.consensus_config() == {"period": 15, "epoch": 30000}
