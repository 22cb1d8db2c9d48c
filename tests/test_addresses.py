import pytest

from vanityminer.addresses import (
    create2_address,
    create3_address,
    guarded_salt,
    keccak256,
)

DEPLOYER = bytes.fromhex("ba5ed099633d3b313e4d5f7bdc1305d3c28ba5ed")
CALLER = bytes.fromhex("deadbeefdeadbeefdeadbeefdeadbeefdeadbeef")
SALT_ONE = bytes.fromhex(
    "0000000000000000000000000000000000000000000000000000000000000001"
)


def test_keccak256_of_empty_input():
    assert keccak256(b"").hex() == (
        "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    )


def test_create3_address_no_protection():
    guarded = guarded_salt(SALT_ONE, None, None)
    assert guarded == keccak256(SALT_ONE)

    computed = create3_address(DEPLOYER, guarded)
    assert computed == bytes.fromhex("cbc02963eef555f755e8af71fd66d3366631fe74")


def test_create2_address():
    deployer = bytes.fromhex("5c69bee701ef814a2b6a3edd4b1652cb9cc5aa6f")
    salt = bytes.fromhex(
        "920b2e81714aa97e44cbc35ae7973d6f38174ad52bca3133ff1b7f4ccd725d69"
    )
    init_code_hash = bytes.fromhex(
        "96e8ac4277198ff8b6f785478aa9a39f403cb768dd02cbee326c3e7da348845f"
    )
    computed = create2_address(deployer, salt, init_code_hash)
    assert computed == bytes.fromhex("4d5b55ae12922cd1f53a8593507a491723c01e00")


def test_guard_modes_give_distinct_salts():
    salts = {
        guarded_salt(SALT_ONE),
        guarded_salt(SALT_ONE, CALLER),
        guarded_salt(SALT_ONE, None, 130),
        guarded_salt(SALT_ONE, CALLER, 130),
    }
    assert len(salts) == 4
    assert all(len(s) == 32 for s in salts)


def test_guard_depends_on_chain_id():
    assert guarded_salt(SALT_ONE, CALLER, 1) != guarded_salt(SALT_ONE, CALLER, 130)
    assert guarded_salt(SALT_ONE, CALLER, 130) == guarded_salt(SALT_ONE, CALLER, 130)


def test_create3_address_is_twenty_bytes():
    address = create3_address(DEPLOYER, guarded_salt(SALT_ONE, CALLER, 130))
    assert len(address) == 20
    assert address != create3_address(DEPLOYER, guarded_salt(SALT_ONE))


@pytest.mark.parametrize(
    "call",
    [
        lambda: guarded_salt(b"\x00" * 31),
        lambda: guarded_salt(SALT_ONE, b"\x00" * 19),
        lambda: guarded_salt(SALT_ONE, None, -1),
        lambda: guarded_salt(SALT_ONE, None, 1 << 64),
        lambda: create2_address(b"\x00" * 21, SALT_ONE, SALT_ONE),
        lambda: create2_address(DEPLOYER, SALT_ONE, b"\x00"),
        lambda: create3_address(DEPLOYER, b"\x00" * 33),
    ],
)
def test_bad_inputs_raise(call):
    with pytest.raises(ValueError):
        call()