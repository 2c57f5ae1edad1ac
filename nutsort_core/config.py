from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError
from .nut import PALETTE
from .scoring import MIN_MOVES

DEFAULT_BOLTS = 7
DEFAULT_HEIGHT = 4
DEFAULT_COLOURS = 5  # colours = bolts - 2 leaves two empty bolts to manoeuvre with


@dataclass(frozen=True)
class GameConfig:
    """Board shape plus the move target used for star ratings."""
    num_bolts: int = DEFAULT_BOLTS
    bolt_height: int = DEFAULT_HEIGHT
    num_colours: int = DEFAULT_COLOURS
    min_moves: int = MIN_MOVES

    def __post_init__(self) -> None:
        for name in ('num_bolts', 'bolt_height', 'num_colours', 'min_moves'):
            value = getattr(self, name)
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigError(f'{name} must be a positive integer, got {value!r}')
        if self.num_colours > len(PALETTE):
            raise ConfigError(
                f'num_colours={self.num_colours} exceeds the palette size {len(PALETTE)}'
            )
        if self.num_colours > self.num_bolts:
            raise ConfigError(
                f'{self.num_colours} colours x {self.bolt_height} nuts cannot fit in '
                f'{self.num_bolts} bolts of height {self.bolt_height}'
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'GameConfig':
        """Reads NUTSORT_BOLTS / NUTSORT_HEIGHT / NUTSORT_COLOURS / NUTSORT_MIN_MOVES."""
        env = os.environ if environ is None else environ

        def _int(var: str, default: int) -> int:
            raw = env.get(var)
            if raw is None or raw.strip() == '':
                return default
            try:
                return int(raw)
            except ValueError:
                raise ConfigError(f'{var} must be an integer, got {raw!r}') from None

        return cls(
            num_bolts=_int('NUTSORT_BOLTS', DEFAULT_BOLTS),
            bolt_height=_int('NUTSORT_HEIGHT', DEFAULT_HEIGHT),
            num_colours=_int('NUTSORT_COLOURS', DEFAULT_COLOURS),
            min_moves=_int('NUTSORT_MIN_MOVES', MIN_MOVES),
        )


def debug_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get('NUTSORT_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')
