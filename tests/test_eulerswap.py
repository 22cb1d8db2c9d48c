import dataclasses

import pytest

from vanityminer.addresses import create2_address, keccak256
from vanityminer.eulerswap import (
    EULERSWAP_HOOK_PERMISSIONS,
    EulerSwapConfig,
    EulerSwapParams,
    creation_code_meta_proxy,
    eulerswap_address,
    mine_eulerswap_salt,
)
from vanityminer.hooks import V4HookConfig, mine_v4_hook_salt


def _addr(text):
    return bytes.fromhex(text.removeprefix("0x").lower())


FACTORY = _addr("0xFb9FE66472917F0F8966506A3bf831Ac0c10caD4")
IMPL = _addr("0xF5d35536482f62c9031b4d6bD34724671BCE33d1")
SALT = bytes.fromhex("ad9a4b2ded54a895eb0ed679849a84bbe50609a3b39654ad9616cd0c24b4107b")
EXPECTED = _addr("0x8863dC83c8EeE1B67e61523ffcb928f40580E8A8")

PARAMS = EulerSwapParams(
    vault0=_addr("0x797DD80692c3b2dAdabCe8e30C07fDE5307D48a9"),
    vault1=_addr("0x313603FA690301b0CaeEf8069c065862f9162162"),
    euler_account=_addr("0x0AFbF798467f9b3b97F90D05Bf7Df592d89A6CF0"),
    equilibrium_reserve0=68925668118,
    equilibrium_reserve1=73751769958,
    price_x=1000000,
    price_y=1000000,
    concentration_x=999000000000000100,
    concentration_y=999000000000000100,
    fee=10000000000000,
    protocol_fee=0,
    protocol_fee_recipient=bytes(20),
)


def test_eulerswap_address():
    assert eulerswap_address(FACTORY, IMPL, PARAMS, SALT) == EXPECTED


def test_abi_encode_layout():
    encoded = PARAMS.abi_encode()
    assert len(encoded) % 32 == 0
    words = [encoded[i : i + 32] for i in range(0, len(encoded), 32)]
    assert len(words) == len(dataclasses.fields(EulerSwapParams))
    assert words[0] == bytes(12) + PARAMS.vault0
    assert words[2] == bytes(12) + PARAMS.euler_account
    assert int.from_bytes(words[3], "big") == PARAMS.equilibrium_reserve0
    assert int.from_bytes(words[9], "big") == PARAMS.fee


def test_abi_encode_rejects_oversized_reserve():
    params = dataclasses.replace(PARAMS, equilibrium_reserve0=1 << 112)
    with pytest.raises(ValueError):
        params.abi_encode()


def test_abi_encode_rejects_bad_address():
    params = dataclasses.replace(PARAMS, vault1=bytes(19))
    with pytest.raises(ValueError):
        params.abi_encode()


def test_creation_code_contains_target_and_metadata():
    metadata = b"\x01\x02\x03"
    code = creation_code_meta_proxy(IMPL, metadata)
    assert code.endswith(metadata)
    assert code[32:52] == IMPL
    assert creation_code_meta_proxy(IMPL, b"") == code[: -len(metadata)]


def test_creation_code_rejects_short_target():
    with pytest.raises(ValueError):
        creation_code_meta_proxy(bytes(10), b"")


def _config_dict(**overrides):
    data = {
        "factory": "0xFb9FE66472917F0F8966506A3bf831Ac0c10caD4",
        "eulerswap_impl": "0xF5d35536482f62c9031b4d6bD34724671BCE33d1",
        "pool_params": {
            "vault0": "0x797DD80692c3b2dAdabCe8e30C07fDE5307D48a9",
            "vault1": "0x313603FA690301b0CaeEf8069c065862f9162162",
            "euler_account": "0x0AFbF798467f9b3b97F90D05Bf7Df592d89A6CF0",
            "equilibrium_reserve0": "68925668118",
            "equilibrium_reserve1": 73751769958,
            "price_x": hex(1000000),
            "price_y": 1000000,
            "concentration_x": "999000000000000100",
            "concentration_y": 999000000000000100,
            "fee": "10000000000000",
            "protocol_fee": 0,
            "protocol_fee_recipient": "0x0000000000000000000000000000000000000000",
        },
        "max_iterations": 50,
        "max_results": 1,
        "seed": 1234,
    }
    data.update(overrides)
    return data


def test_config_from_dict():
    config = EulerSwapConfig.from_dict(_config_dict())
    assert config.factory == FACTORY
    assert config.eulerswap_impl == IMPL
    assert config.pool_params == PARAMS
    assert config.max_iterations == 50
    assert config.seed == 1234
    assert eulerswap_address(config.factory, config.eulerswap_impl, config.pool_params, SALT) == EXPECTED


def test_config_from_dict_rejects_bad_number():
    data = _config_dict()
    data["pool_params"] = dict(data["pool_params"], fee="ten")
    with pytest.raises(ValueError):
        EulerSwapConfig.from_dict(data)


def test_config_from_dict_rejects_missing_param():
    data = _config_dict()
    params = dict(data["pool_params"])
    del params["price_y"]
    data["pool_params"] = params
    with pytest.raises(ValueError):
        EulerSwapConfig.from_dict(data)


def test_mine_matches_hook_mining():
    config = EulerSwapConfig(
        factory=FACTORY,
        eulerswap_impl=IMPL,
        pool_params=PARAMS,
        max_iterations=200,
        max_results=1,
        seed=99,
    )
    init_code_hash = keccak256(creation_code_meta_proxy(IMPL, PARAMS.abi_encode()))
    expected = mine_v4_hook_salt(
        V4HookConfig(
            deployer=FACTORY,
            init_code_hash=init_code_hash,
            permissions=EULERSWAP_HOOK_PERMISSIONS,
            max_iterations=200,
            max_results=1,
            seed=99,
        )
    )
    result = mine_eulerswap_salt(config)
    assert result.results == expected.results
    assert result.total_iterations == expected.total_iterations


def test_mine_finds_pool_with_hook_suffix():
    config = EulerSwapConfig(
        factory=FACTORY,
        eulerswap_impl=IMPL,
        pool_params=PARAMS,
        max_iterations=1_000_000,
        max_results=1,
        seed=1234,
    )
    result = mine_eulerswap_salt(config)
    assert len(result.results) == 1
    match = result.results[0]
    assert match.computed_address.endswith(EULERSWAP_HOOK_PERMISSIONS.to_suffix())
    assert eulerswap_address(FACTORY, IMPL, PARAMS, match.salt) == match.computed_address
    init_code_hash = keccak256(creation_code_meta_proxy(IMPL, PARAMS.abi_encode()))
    assert create2_address(FACTORY, match.salt, init_code_hash) == match.computed_address