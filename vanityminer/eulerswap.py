"""Address derivation and salt mining for EulerSwap pools."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .addresses import create2_address, keccak256
from .createx_config import _parse_hex, _required
from .hooks import V4HookConfig, V4HookMatch, V4HookPermissions, V4HookResult, mine_v4_hook_salt
from .jsonvalues import parse_optional_u128, parse_u64

_BYTECODE_HEAD = bytes.fromhex(
    "600b380380600b3d393df3363d3d373d3d3d3d60368038038091363936013d73"
)
_BYTECODE_TAIL = bytes.fromhex("5af43d3d93803e603457fd5bf3")

_DECIMAL = re.compile(r"[0-9]+")
_HEXADECIMAL = re.compile(r"[0-9a-fA-F]+")

EULERSWAP_HOOK_PERMISSIONS = V4HookPermissions(
    before_initialize=True,
    before_swap=True,
    before_swap_return_delta=True,
    before_donate=True,
    before_add_liquidity=True,
)

EulerSwapMatch = V4HookMatch
EulerSwapResult = V4HookResult


def _address_word(address: bytes, name: str) -> bytes:
    address = bytes(address)
    if len(address) != 20:
        raise ValueError(f"`{name}` must be 20 bytes, got {len(address)}")
    return bytes(12) + address


def _uint_word(value: int, bits: int, name: str) -> bytes:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"`{name}` must be an integer")
    if not 0 <= value < (1 << bits):
        raise ValueError(f"`{name}` does not fit in uint{bits}")
    return value.to_bytes(32, "big")


def _parse_uint(value: Any, bits: int, name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"`{name}` must be an integer or a numeric string")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        if value[:2] in ("0x", "0X"):
            digits = value[2:]
            if not _HEXADECIMAL.fullmatch(digits):
                raise ValueError(f"invalid number for `{name}`")
            number = int(digits, 16)
        elif _DECIMAL.fullmatch(value):
            number = int(value)
        else:
            raise ValueError(f"invalid number for `{name}`")
    else:
        raise ValueError(f"`{name}` must be an integer or a numeric string")
    if not 0 <= number < (1 << bits):
        raise ValueError(f"`{name}` does not fit in uint{bits}")
    return number


@dataclass(frozen=True)
class EulerSwapParams:
    """The pool parameters appended to the pool's creation code."""

    vault0: bytes
    vault1: bytes
    euler_account: bytes
    equilibrium_reserve0: int
    equilibrium_reserve1: int
    price_x: int
    price_y: int
    concentration_x: int
    concentration_y: int
    fee: int
    protocol_fee: int
    protocol_fee_recipient: bytes

    def abi_encode(self) -> bytes:
        """ABI-encode the parameters as a static tuple of 32-byte words."""
        return b"".join(
            (
                _address_word(self.vault0, "vault0"),
                _address_word(self.vault1, "vault1"),
                _address_word(self.euler_account, "euler_account"),
                _uint_word(self.equilibrium_reserve0, 112, "equilibrium_reserve0"),
                _uint_word(self.equilibrium_reserve1, 112, "equilibrium_reserve1"),
                _uint_word(self.price_x, 256, "price_x"),
                _uint_word(self.price_y, 256, "price_y"),
                _uint_word(self.concentration_x, 256, "concentration_x"),
                _uint_word(self.concentration_y, 256, "concentration_y"),
                _uint_word(self.fee, 256, "fee"),
                _uint_word(self.protocol_fee, 256, "protocol_fee"),
                _address_word(self.protocol_fee_recipient, "protocol_fee_recipient"),
            )
        )


def _params_from_mapping(data: Any) -> EulerSwapParams:
    if not isinstance(data, Mapping):
        raise ValueError("`pool_params` must be an object")

    def address(key: str) -> bytes:
        return _parse_hex(_required(data, key), 20, key)

    def uint(key: str, bits: int = 256) -> int:
        return _parse_uint(_required(data, key), bits, key)

    return EulerSwapParams(
        vault0=address("vault0"),
        vault1=address("vault1"),
        euler_account=address("euler_account"),
        equilibrium_reserve0=uint("equilibrium_reserve0", 112),
        equilibrium_reserve1=uint("equilibrium_reserve1", 112),
        price_x=uint("price_x"),
        price_y=uint("price_y"),
        concentration_x=uint("concentration_x"),
        concentration_y=uint("concentration_y"),
        fee=uint("fee"),
        protocol_fee=uint("protocol_fee"),
        protocol_fee_recipient=address("protocol_fee_recipient"),
    )


@dataclass(frozen=True)
class EulerSwapConfig:
    """Parameters for mining an EulerSwap pool salt."""

    factory: bytes
    eulerswap_impl: bytes
    pool_params: EulerSwapParams
    max_iterations: int = 0
    max_results: int = 0
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EulerSwapConfig":
        """Build a config from a mapping with hex strings and numeric fields."""
        return cls(
            factory=_parse_hex(_required(data, "factory"), 20, "factory"),
            eulerswap_impl=_parse_hex(
                _required(data, "eulerswap_impl"), 20, "eulerswap_impl"
            ),
            pool_params=_params_from_mapping(_required(data, "pool_params")),
            max_iterations=parse_u64(_required(data, "max_iterations")),
            max_results=parse_u64(_required(data, "max_results")),
            seed=parse_optional_u128(data.get("seed")),
        )


def creation_code_meta_proxy(target_contract: bytes, metadata: bytes) -> bytes:
    """Creation code of a proxy delegating to ``target_contract`` with ``metadata`` appended."""
    target_contract = bytes(target_contract)
    if len(target_contract) != 20:
        raise ValueError(f"target_contract must be 20 bytes, got {len(target_contract)}")
    return _BYTECODE_HEAD + target_contract + _BYTECODE_TAIL + bytes(metadata)


def eulerswap_address(
    factory: bytes, eulerswap_impl: bytes, pool_params: EulerSwapParams, salt: bytes
) -> bytes:
    """Compute the address at which the factory deploys a pool with ``salt``."""
    creation_code = creation_code_meta_proxy(eulerswap_impl, pool_params.abi_encode())
    return create2_address(factory, salt, keccak256(creation_code))


def mine_eulerswap_salt(config: EulerSwapConfig) -> EulerSwapResult:
    """Mine salts giving pool addresses that carry EulerSwap's hook permissions."""
    creation_code = creation_code_meta_proxy(
        config.eulerswap_impl, config.pool_params.abi_encode()
    )
    hook_config = V4HookConfig(
        deployer=config.factory,
        init_code_hash=keccak256(creation_code),
        permissions=EULERSWAP_HOOK_PERMISSIONS,
        max_iterations=config.max_iterations,
        max_results=config.max_results,
        seed=config.seed,
    )
    return mine_v4_hook_salt(hook_config)