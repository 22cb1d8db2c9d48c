"""Salt mining for Uniswap v4 hook addresses that encode permission flags."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional

from .createx_config import (
    Create2Config,
    Create2Match,
    Create2Result,
    _parse_hex,
    _required,
)
from .createx_miner import mine_create2_salt_with_suffix
from .jsonvalues import parse_optional_u128, parse_u64

# Bitmask covering all fourteen hook flags.
ALL_HOOK_MASK = (1 << 14) - 1


class HookFlag(enum.IntFlag):
    """Permission bits carried in the low bits of a hook address."""

    BEFORE_INITIALIZE = 1 << 13
    AFTER_INITIALIZE = 1 << 12
    BEFORE_ADD_LIQUIDITY = 1 << 11
    AFTER_ADD_LIQUIDITY = 1 << 10
    BEFORE_REMOVE_LIQUIDITY = 1 << 9
    AFTER_REMOVE_LIQUIDITY = 1 << 8
    BEFORE_SWAP = 1 << 7
    AFTER_SWAP = 1 << 6
    BEFORE_DONATE = 1 << 5
    AFTER_DONATE = 1 << 4
    BEFORE_SWAP_RETURN_DELTA = 1 << 3
    AFTER_SWAP_RETURN_DELTA = 1 << 2
    AFTER_ADD_LIQUIDITY_RETURN_DELTA = 1 << 1
    AFTER_REMOVE_LIQUIDITY_RETURN_DELTA = 1 << 0


@dataclass(frozen=True)
class V4HookPermissions:
    """Which hooks a contract implements; all disabled by default."""

    before_initialize: bool = False
    after_initialize: bool = False
    before_add_liquidity: bool = False
    after_add_liquidity: bool = False
    before_remove_liquidity: bool = False
    after_remove_liquidity: bool = False
    before_swap: bool = False
    after_swap: bool = False
    before_donate: bool = False
    after_donate: bool = False
    before_swap_return_delta: bool = False
    after_swap_return_delta: bool = False
    after_add_liquidity_return_delta: bool = False
    after_remove_liquidity_return_delta: bool = False

    def to_flags(self) -> int:
        """Combine the enabled permissions into a 14-bit mask."""
        flags = HookFlag(0)
        for permission in fields(self):
            if getattr(self, permission.name):
                flags |= HookFlag[permission.name.upper()]
        return int(flags)

    def to_suffix(self) -> bytes:
        """The two trailing address bytes that encode these permissions."""
        return self.to_flags().to_bytes(2, "big")


def _permissions_from_mapping(value: Any) -> V4HookPermissions:
    if not isinstance(value, Mapping):
        raise ValueError("`permissions` must be an object")
    settings = {}
    for permission in fields(V4HookPermissions):
        enabled = _required(value, permission.name)
        if not isinstance(enabled, bool):
            raise ValueError(f"`{permission.name}` must be a boolean")
        settings[permission.name] = enabled
    return V4HookPermissions(**settings)


@dataclass(frozen=True)
class V4HookConfig:
    """Parameters for mining a hook address with the given permissions."""

    deployer: bytes
    init_code_hash: bytes
    permissions: V4HookPermissions = field(default_factory=V4HookPermissions)
    max_iterations: int = 0
    max_results: int = 0
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "V4HookConfig":
        """Build a config from a mapping with hex strings and numeric fields."""
        return cls(
            deployer=_parse_hex(_required(data, "deployer"), 20, "deployer"),
            init_code_hash=_parse_hex(
                _required(data, "init_code_hash"), 32, "init_code_hash"
            ),
            permissions=_permissions_from_mapping(_required(data, "permissions")),
            max_iterations=parse_u64(_required(data, "max_iterations")),
            max_results=parse_u64(_required(data, "max_results")),
            seed=parse_optional_u128(data.get("seed")),
        )


V4HookMatch = Create2Match
V4HookResult = Create2Result


def mine_v4_hook_salt(config: V4HookConfig) -> V4HookResult:
    """Mine CREATE2 salts whose addresses end with the permission flag bytes."""
    create2_config = Create2Config(
        deployer=config.deployer,
        init_code_hash=config.init_code_hash,
        max_iterations=config.max_iterations,
        max_results=config.max_results,
        seed=config.seed,
    )
    return mine_create2_salt_with_suffix(create2_config, config.permissions.to_suffix())