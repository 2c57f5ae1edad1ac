from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

Colour = str  # single letter, see PALETTE

# Order matters: generation takes the first num_colours entries.
COLOUR_RGB: Dict[Colour, str] = {
    'r': 'rgb(255, 0, 0)',
    'g': 'rgb(0, 255, 0)',
    'b': 'rgb(0, 0, 255)',
    'y': 'rgb(255, 255, 0)',
    'e': 'rgb(128, 128, 128)',
    'o': 'rgb(255, 165, 0)',
    'p': 'rgb(128, 0, 128)',
    'c': 'rgb(0, 255, 255)',
    'k': 'rgb(255, 105, 180)',
}

PALETTE: Tuple[Colour, ...] = tuple(COLOUR_RGB)


@dataclass(frozen=True)
class Nut:
    """A single coloured token. Highlighting lives in the board's selection overlay."""
    colour: Colour

    def __str__(self) -> str:
        return self.colour
