# vanityminer

Find deployment salts that give smart-contract addresses a chosen shape:
a prefix, a suffix, a byte sequence anywhere in the address, or any
condition you can write as a Python function over the 20 address bytes.

It covers:

- **CREATE2**: deployer + salt + init code hash addresses.
- **CREATE3 via CreateX**: including CreateX's salt guard for permissioned
  (caller-bound) and cross-chain-protected deployments.
- **Uniswap v4 hooks**: addresses whose last two bytes encode the hook
  permission flags.
- **EulerSwap pools**: hook-compatible addresses for pools deployed as
  metadata proxies by the EulerSwap factory.

Addresses, salts and hashes are plain `bytes` (20 bytes for an address,
32 for a salt or hash). Keccak-256 comes from `pycryptodome`.

## Installation

Install the package from its source tree with pip. The `test` extra adds
pytest for running the test suite.

## Computing addresses

`vanityminer.addresses` holds the derivations:

```python
from vanityminer.addresses import create2_address, create3_address, guarded_salt, keccak256

deployer = bytes.fromhex("ba5ed099633d3b313e4d5f7bdc1305d3c28ba5ed")
salt = (1).to_bytes(32, "big")

guarded = guarded_salt(salt, None, None)   # same as keccak256(salt)
print(create3_address(deployer, guarded).hex())
```

- `guarded_salt(salt, caller=None, chain_id=None)` applies CreateX's guard:
  pass a caller address, a chain id, both, or neither.
- `create3_address(deployer, guarded_salt)` expects a salt that is already
  guarded.
- `create2_address(deployer, salt, init_code_hash)` is the plain CREATE2
  formula.

Inputs of the wrong length raise `ValueError`.

## Configurations

Each mining function takes a frozen dataclass configuration. They can be
built directly or with `from_dict`, which accepts hex strings (with or
without `0x`) or raw bytes for addresses and hashes, and numbers or decimal
strings for `max_iterations`, `max_results` and `seed`. Missing required
fields or malformed values raise `ValueError`. `seed` may be `None`, in which
case mining starts from a fixed default seed (1337), so runs are
reproducible.

## Mining CREATE3 salts

```python
from vanityminer.createx_config import Create3Config
from vanityminer.createx_miner import mine_create3_salt, mine_create3_salt_with_prefix

config = Create3Config.from_dict({
    "deployer": "0xba5ed099633d3b313e4d5f7bdc1305d3c28ba5ed",
    "caller": None,
    "chain_id": None,
    "max_iterations": 1_000_000,
    "max_results": 1,
    "seed": 1234,
})

result = mine_create3_salt_with_prefix(config, bytes.fromhex("2718"))
for match in result.results:
    print(match.salt.hex(), match.guarded_salt.hex(), match.computed_address.hex())
print("iterations:", result.total_iterations)

# Any predicate over the 20-byte address works too.
result = mine_create3_salt(config, lambda address: address[0] < 0x10)
```

Each CREATE3 salt holds the caller (or zeros) in bytes 0–19, `0x01` in
byte 20 when a chain id is set (`0x00` otherwise), and the low 11 bytes of
`seed + iteration` after that.

`mine_create3_salt_with_suffix` and `mine_create3_salt_with_contains` search
for a suffix or a byte sequence anywhere in the address. Patterns longer than
20 bytes raise `ValueError`, as does an empty sequence for the "contains"
search.

## Mining CREATE2 salts

```python
from vanityminer.createx_config import Create2Config
from vanityminer.createx_miner import mine_create2_salt_with_suffix

config = Create2Config.from_dict({
    "deployer": "0x5c69bee701ef814a2b6a3edd4b1652cb9cc5aa6f",
    "init_code_hash": "0x96e8ac4277198ff8b6f785478aa9a39f403cb768dd02cbee326c3e7da348845f",
    "max_iterations": 1_000_000,
    "max_results": 3,
    "seed": None,
})
result = mine_create2_salt_with_suffix(config, b"\xbe\xef")
```

The first CREATE2 salt tried is the Keccak-256 hash of the seed (16 bytes,
big-endian) plus one; each further attempt adds one. `mine_create2_salt`,
`mine_create2_salt_with_prefix` and `mine_create2_salt_with_contains` work
as their CREATE3 counterparts do.

Mining stops after `max_iterations` attempts or once `max_results` matches
are found, whichever comes first.

## Uniswap v4 hooks

```python
import dataclasses

from vanityminer.hooks import V4HookConfig, V4HookPermissions, mine_v4_hook_salt

permissions = V4HookPermissions(before_swap=True, after_swap=True)
print(hex(permissions.to_flags()), permissions.to_suffix().hex())  # 0xc0 00c0

config = V4HookConfig.from_dict({
    "deployer": "0x4e59b44847b379578588920ca78fbf26c0b4956c",
    # from_dict needs every one of the fourteen permission fields as a boolean
    "permissions": dataclasses.asdict(permissions),
    "init_code_hash": "0x" + "00" * 32,
    "max_iterations": 1_000_000,
    "max_results": 1,
    "seed": 42,
})
result = mine_v4_hook_salt(config)
```

`mine_v4_hook_salt` mines CREATE2 salts whose addresses end with the two
bytes of `to_suffix()`. The individual bits are available as the `HookFlag`
enum, and `ALL_HOOK_MASK` covers all fourteen.

## EulerSwap pools

`vanityminer.eulerswap` provides:

- `EulerSwapParams`: the pool parameters, with `abi_encode()`;
- `creation_code_meta_proxy(target_contract, metadata)`: the proxy creation
  code with the metadata appended;
- `eulerswap_address(factory, eulerswap_impl, pool_params, salt)`: the
  address a pool is deployed at;
- `mine_eulerswap_salt(config)`: mining for a salt whose pool address carries
  the hook permissions EulerSwap needs (`EULERSWAP_HOOK_PERMISSIONS`).

```python
from vanityminer.eulerswap import EulerSwapConfig, mine_eulerswap_salt

config = EulerSwapConfig.from_dict({
    "factory": "0xFb9FE66472917F0F8966506A3bf831Ac0c10caD4",
    "eulerswap_impl": "0xF5d35536482f62c9031b4d6bD34724671BCE33d1",
    "pool_params": {
        "vault0": "0x797DD80692c3b2dAdabCe8e30C07fDE5307D48a9",
        "vault1": "0x313603FA690301b0CaeEf8069c065862f9162162",
        "euler_account": "0x0AFbF798467f9b3b97F90D05Bf7Df592d89A6CF0",
        "equilibrium_reserve0": 68925668118,
        "equilibrium_reserve1": 73751769958,
        "price_x": 1000000,
        "price_y": 1000000,
        "concentration_x": "999000000000000100",
        "concentration_y": "999000000000000100",
        "fee": "10000000000000",
        "protocol_fee": 0,
        "protocol_fee_recipient": "0x" + "00" * 20,
    },
    "max_iterations": 1_000_000,
    "max_results": 1,
    "seed": None,
})
result = mine_eulerswap_salt(config)
```

Pool parameter integers may be given as ints, decimal strings or `0x` hex
strings; the reserves must fit in 112 bits and the rest in 256.

## Results as plain data

Every match and result object has `to_dict()`: salts as `0x` hex strings,
addresses as checksummed `0x` strings, and `total_iterations` as a float.
`vanityminer.jsonvalues` holds the lenient number decoding used by
`from_dict` (`parse_u64`, `parse_optional_u128`) and `serialize_count`.

## What it does not do

This is a library only: there is no command-line tool. Mining runs in a
single thread in the calling process, with no parallelism and no progress
reporting.