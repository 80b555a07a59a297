"""
Input Representations Module.

Tensor views of 2048 boards for learning agents. encode_boards() and
grids_to_tensor() turn Boards into tensors; each Representation then
flattens them for an agent's network.

All representations implement the interface:
- __init__(config: dict)
- forward(state: Tensor) -> Tensor
- output_shape() -> tuple

Available representations:
- OneHotRepresentation: Pass-through identity over one-hot encodings
- NormalizedRepresentation: Log2 grids scaled by each board's max value
"""

from representations.base import Representation
from representations.encoding import encode_boards, encode_direction, grids_to_tensor
from representations.normalized import NormalizedRepresentation
from representations.onehot import OneHotRepresentation

__all__ = [
    "Representation",
    "OneHotRepresentation",
    "NormalizedRepresentation",
    "encode_boards",
    "encode_direction",
    "grids_to_tensor",
]
