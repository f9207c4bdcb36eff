# config.py

"""Decoder configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DecoderOptions:
    """Knobs that change what the decoder accepts.

    - ``strict_key_order``: dictionary keys must arrive strictly ascending.
      When False, any order is accepted but a repeated key is still an
      error.
    - ``integer_bits``: bound integers to a signed width of this many bits
      (64 gives int64). None means arbitrary precision.
    - ``max_depth``: reject lists/dicts nested deeper than this. None
      means unbounded.
    """

    strict_key_order: bool = True
    integer_bits: int | None = None
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.integer_bits is not None and self.integer_bits < 1:
            raise ValueError(f"integer_bits must be at least 1, got {self.integer_bits}")
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")

    @classmethod
    def lenient(cls, **kwargs) -> DecoderOptions:
        return cls(strict_key_order=False, **kwargs)

    def integer_range(self) -> tuple[int, int] | None:
        """Inclusive (min, max) allowed for integers, or None when unbounded."""
        if self.integer_bits is None:
            return None
        limit = 1 << (self.integer_bits - 1)
        return -limit, limit - 1


DEFAULT_OPTIONS = DecoderOptions()
