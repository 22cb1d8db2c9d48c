"""Contract address derivation for CREATE2 and CreateX's CREATE3 scheme."""

from __future__ import annotations

from typing import Optional

from Crypto.Hash import keccak

# Proxy init code used by the CreateX CREATE3 deployment pattern.
_PROXY_INIT_CODE = bytes.fromhex("67363d3d37363d34f03d5260086018f3")

_U64_MAX = (1 << 64) - 1


def keccak256(data: bytes) -> bytes:
    """Return the 32-byte Keccak-256 digest of ``data``."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


def _check_length(value: bytes, size: int, name: str) -> bytes:
    value = bytes(value)
    if len(value) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(value)}")
    return value


def _word(number: int) -> bytes:
    return number.to_bytes(32, "big")


def guarded_salt(
    salt: bytes, caller: Optional[bytes] = None, chain_id: Optional[int] = None
) -> bytes:
    """Apply CreateX's salt guard for the given caller and chain protections."""
    salt = _check_length(salt, 32, "salt")
    if caller is not None:
        caller = _check_length(caller, 20, "caller")
    if chain_id is not None and not 0 <= chain_id <= _U64_MAX:
        raise ValueError("chain_id must fit in 64 bits")

    if caller is not None and chain_id is not None:
        return keccak256(bytes(12) + caller + _word(chain_id) + salt)
    if caller is not None:
        return keccak256(bytes(12) + caller + salt)
    if chain_id is not None:
        return keccak256(_word(chain_id) + salt)
    return keccak256(salt)


def create2_address(deployer: bytes, salt: bytes, init_code_hash: bytes) -> bytes:
    """Compute the CREATE2 address for a deployer, salt and init code hash."""
    deployer = _check_length(deployer, 20, "deployer")
    salt = _check_length(salt, 32, "salt")
    init_code_hash = _check_length(init_code_hash, 32, "init_code_hash")
    return keccak256(b"\xff" + deployer + salt + init_code_hash)[12:]


def create3_address(deployer: bytes, guarded_salt: bytes) -> bytes:
    """Compute the CREATE3 address from a deployer and an already guarded salt."""
    proxy = create2_address(deployer, guarded_salt, keccak256(_PROXY_INIT_CODE))
    # RLP of [proxy, nonce=1]: the first contract the proxy creates.
    return keccak256(b"\xd6\x94" + proxy + b"\x01")[12:]