"""Settings and results for CREATE2 and CREATE3 salt mining."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .addresses import keccak256
from .jsonvalues import U64_MAX, parse_optional_u128, parse_u64, serialize_count


def _parse_hex(value: Any, size: int, name: str) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    elif isinstance(value, str):
        text = value[2:] if value[:2] in ("0x", "0X") else value
        try:
            raw = bytes.fromhex(text)
        except ValueError:
            raise ValueError(f"invalid hex string for `{name}`") from None
    else:
        raise ValueError(f"`{name}` must be a hex string")
    if len(raw) != size:
        raise ValueError(f"`{name}` must be {size} bytes, got {len(raw)}")
    return raw


def _required(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    return data[key]


def _optional_address(data: Mapping[str, Any], key: str) -> Optional[bytes]:
    value = data.get(key)
    return None if value is None else _parse_hex(value, 20, key)


def _optional_chain_id(data: Mapping[str, Any]) -> Optional[int]:
    value = data.get("chain_id")
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= U64_MAX:
        raise ValueError("`chain_id` must be an unsigned 64-bit integer")
    return value


def _hex(raw: bytes) -> str:
    return "0x" + raw.hex()


def _checksum(address: bytes) -> str:
    """Format an address with mixed-case checksum letters."""
    lower = address.hex()
    digest = keccak256(lower.encode("ascii")).hex()
    return "0x" + "".join(
        ch.upper() if ch.isalpha() and int(h, 16) >= 8 else ch
        for ch, h in zip(lower, digest)
    )


@dataclass(frozen=True)
class Create3Config:
    """Parameters for mining a CREATE3 salt through CreateX."""

    deployer: bytes
    caller: Optional[bytes] = None
    chain_id: Optional[int] = None
    max_iterations: int = 0
    max_results: int = 0
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Create3Config":
        """Build a config from a mapping with hex strings and numeric fields."""
        return cls(
            deployer=_parse_hex(_required(data, "deployer"), 20, "deployer"),
            caller=_optional_address(data, "caller"),
            chain_id=_optional_chain_id(data),
            max_iterations=parse_u64(_required(data, "max_iterations")),
            max_results=parse_u64(_required(data, "max_results")),
            seed=parse_optional_u128(data.get("seed")),
        )


@dataclass(frozen=True)
class Create3Match:
    """A salt whose CREATE3 address satisfied the search."""

    salt: bytes
    guarded_salt: bytes
    computed_address: bytes

    def to_dict(self) -> dict:
        return {
            "salt": _hex(self.salt),
            "guarded_salt": _hex(self.guarded_salt),
            "computed_address": _checksum(self.computed_address),
        }


@dataclass
class Create3Result:
    """The matches found and how many salts were tried."""

    results: list = field(default_factory=list)
    total_iterations: int = 0

    def to_dict(self) -> dict:
        return {
            "results": [match.to_dict() for match in self.results],
            "total_iterations": serialize_count(self.total_iterations),
        }


@dataclass(frozen=True)
class Create2Config:
    """Parameters for mining a CREATE2 salt."""

    deployer: bytes
    init_code_hash: bytes
    max_iterations: int = 0
    max_results: int = 0
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Create2Config":
        """Build a config from a mapping with hex strings and numeric fields."""
        return cls(
            deployer=_parse_hex(_required(data, "deployer"), 20, "deployer"),
            init_code_hash=_parse_hex(
                _required(data, "init_code_hash"), 32, "init_code_hash"
            ),
            max_iterations=parse_u64(_required(data, "max_iterations")),
            max_results=parse_u64(_required(data, "max_results")),
            seed=parse_optional_u128(data.get("seed")),
        )


@dataclass(frozen=True)
class Create2Match:
    """A salt whose CREATE2 address satisfied the search."""

    salt: bytes
    computed_address: bytes

    def to_dict(self) -> dict:
        return {
            "salt": _hex(self.salt),
            "computed_address": _checksum(self.computed_address),
        }


@dataclass
class Create2Result:
    """The matches found and how many salts were tried."""

    results: list = field(default_factory=list)
    total_iterations: int = 0

    def to_dict(self) -> dict:
        return {
            "results": [match.to_dict() for match in self.results],
            "total_iterations": serialize_count(self.total_iterations),
        }