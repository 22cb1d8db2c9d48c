"""Search for salts whose CREATE2 or CREATE3 addresses satisfy a condition."""

from __future__ import annotations

from typing import Callable

from .addresses import create2_address, create3_address, guarded_salt, keccak256
from .createx_config import (
    Create2Config,
    Create2Match,
    Create2Result,
    Create3Config,
    Create3Match,
    Create3Result,
)

Predicate = Callable[[bytes], bool]

DEFAULT_SEED = 1337

_ADDRESS_SIZE = 20
_U128_MASK = (1 << 128) - 1
_U256_MASK = (1 << 256) - 1


def _check_pattern(pattern: bytes, message: str) -> bytes:
    pattern = bytes(pattern)
    if len(pattern) > _ADDRESS_SIZE:
        raise ValueError(message)
    return pattern


def _contains_predicate(contains: bytes) -> Predicate:
    contains = _check_pattern(
        contains, "Contained sequence cannot be longer than 20 bytes"
    )
    if not contains:
        raise ValueError("Contained sequence must not be empty")
    return lambda address: contains in address


def mine_create2_salt(config: Create2Config, predicate: Predicate) -> Create2Result:
    """Try successive salts until enough CREATE2 addresses satisfy ``predicate``.

    The first salt is the Keccak-256 hash of the 16-byte big-endian seed plus
    one; each further attempt adds one more, wrapping at 256 bits.
    """
    seed = DEFAULT_SEED if config.seed is None else config.seed
    salt_value = int.from_bytes(keccak256(seed.to_bytes(16, "big")), "big")
    results: list = []
    total_iterations = 0

    for iteration in range(config.max_iterations):
        total_iterations = iteration + 1
        salt_value = (salt_value + 1) & _U256_MASK
        salt = salt_value.to_bytes(32, "big")

        address = create2_address(config.deployer, salt, config.init_code_hash)
        if predicate(address):
            results.append(Create2Match(salt=salt, computed_address=address))
            if len(results) >= config.max_results:
                break

    return Create2Result(results=results, total_iterations=total_iterations)


def mine_create2_salt_with_prefix(config: Create2Config, prefix: bytes) -> Create2Result:
    """Mine a CREATE2 salt whose address starts with ``prefix``."""
    prefix = _check_pattern(prefix, "Prefix cannot be longer than 20 bytes")
    return mine_create2_salt(config, lambda address: address.startswith(prefix))


def mine_create2_salt_with_suffix(config: Create2Config, suffix: bytes) -> Create2Result:
    """Mine a CREATE2 salt whose address ends with ``suffix``."""
    suffix = _check_pattern(suffix, "Suffix cannot be longer than 20 bytes")
    return mine_create2_salt(config, lambda address: address.endswith(suffix))


def mine_create2_salt_with_contains(
    config: Create2Config, contains: bytes
) -> Create2Result:
    """Mine a CREATE2 salt whose address contains the byte sequence ``contains``."""
    return mine_create2_salt(config, _contains_predicate(contains))


def _create3_salt_head(config: Create3Config) -> bytes:
    """The fixed first 21 bytes of a CreateX salt: caller and chain marker."""
    caller_part = bytes(config.caller) if config.caller is not None else bytes(20)
    chain_marker = b"\x01" if config.chain_id is not None else b"\x00"
    return caller_part + chain_marker


def mine_create3_salt(config: Create3Config, predicate: Predicate) -> Create3Result:
    """Try successive salts until enough CREATE3 addresses satisfy ``predicate``.

    Each salt holds the caller (if any) in its first 20 bytes, a cross-chain
    marker in byte 20, and the low 11 bytes of ``seed + iteration`` after it.
    """
    head = _create3_salt_head(config)
    seed = DEFAULT_SEED if config.seed is None else config.seed
    results: list = []
    total_iterations = 0

    for iteration in range(config.max_iterations):
        total_iterations = iteration + 1
        counter = (seed + iteration) & _U128_MASK
        salt = head + counter.to_bytes(16, "big")[5:]

        guarded = guarded_salt(salt, config.caller, config.chain_id)
        address = create3_address(config.deployer, guarded)
        if predicate(address):
            results.append(
                Create3Match(salt=salt, guarded_salt=guarded, computed_address=address)
            )
            if len(results) >= config.max_results:
                break

    return Create3Result(results=results, total_iterations=total_iterations)


def mine_create3_salt_with_prefix(config: Create3Config, prefix: bytes) -> Create3Result:
    """Mine a CREATE3 salt whose address starts with ``prefix``."""
    prefix = _check_pattern(prefix, "Prefix cannot be longer than 20 bytes")
    return mine_create3_salt(config, lambda address: address.startswith(prefix))


def mine_create3_salt_with_suffix(config: Create3Config, suffix: bytes) -> Create3Result:
    """Mine a CREATE3 salt whose address ends with ``suffix``."""
    suffix = _check_pattern(suffix, "Suffix cannot be longer than 20 bytes")
    return mine_create3_salt(config, lambda address: address.endswith(suffix))


def mine_create3_salt_with_contains(
    config: Create3Config, contains: bytes
) -> Create3Result:
    """Mine a CREATE3 salt whose address contains the byte sequence ``contains``."""
    return mine_create3_salt(config, _contains_predicate(contains))