"""Generate a random version-4 UUID and print it as a declaration."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence
from dataclasses import dataclass

from eacripper.mtrandom import MersenneTwister


@dataclass(frozen=True)
class UUIDFields:
    """The fields of a UUID: 32, 16, 16 and 16 bits, then six bytes."""

    val1: int
    val2: int
    val3: int
    val4: int
    val5: tuple[int, int, int, int, int, int]

    def __post_init__(self) -> None:
        for name, value, bits in (
            ("val1", self.val1, 32),
            ("val2", self.val2, 16),
            ("val3", self.val3, 16),
            ("val4", self.val4, 16),
        ):
            if not 0 <= value < 1 << bits:
                raise ValueError(f"{name} {value} does not fit in {bits} bits")
        if len(self.val5) != 6:
            raise ValueError(f"val5 needs 6 bytes, got {len(self.val5)}")
        if any(not 0 <= byte <= 0xFF for byte in self.val5):
            raise ValueError("val5 bytes must lie in [0, 255]")


def generate_fields(rng: MersenneTwister) -> UUIDFields:
    """Draw the fields of a random version-4, RFC 4122 variant UUID."""
    val1 = rng.genrand_int32()
    val2 = int(rng.genrand_real2() * 0x10000)
    val3 = 0x4000 | int(rng.genrand_real2() * 0x1000)
    variant = int(rng.genrand_real2() * 4) + 8
    val4 = (variant << 12) | int(rng.genrand_real2() * 0x1000)
    val5 = tuple(int(rng.genrand_real2() * 0x100) for _ in range(6))
    return UUIDFields(val1, val2, val3, val4, val5)


def format_declaration(fields: UUIDFields) -> str:
    """Return the constructor expression that rebuilds *fields*."""
    tail = ", ".join(f"0x{byte:02X}" for byte in fields.val5)
    return (
        f"ERUUID(0x{fields.val1:08X}, 0x{fields.val2:04X}, "
        f"0x{fields.val3:04X}, 0x{fields.val4:04X}, {tail})"
    )


def format_uuid(fields: UUIDFields) -> str:
    """Return the UUID in upper-case hyphenated form."""
    node = "".join(f"{byte:02X}" for byte in fields.val5)
    return (
        f"{fields.val1:08X}-{fields.val2:04X}-{fields.val3:04X}-"
        f"{fields.val4:04X}-{node}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print a new UUID as a declaration and as a comment."""
    parser = argparse.ArgumentParser(
        prog="eacripper-uuidgen", description="Generate a random UUID."
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed instead of the current time"
    )
    args = parser.parse_args(argv)
    seed = int(time.time()) if args.seed is None else args.seed
    fields = generate_fields(MersenneTwister(seed))
    print(format_declaration(fields))
    print(f"// {format_uuid(fields)}")
    return 0