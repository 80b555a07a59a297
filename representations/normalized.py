"""
Normalized Representation.

Flattens integer grids and scales each board by its own largest value, so
the biggest tile reads 1.0 and empty cells read 0.0.
"""

from typing import Dict, Any, Tuple

import torch
from torch import Tensor

from representations.base import Representation


class NormalizedRepresentation(Representation):
    """Per-board max normalization of log2 grids.

    Input: (N, S, S) integer log2 grids from grids_to_tensor()
    Output: (N, S*S) float tensor in [0, 1]
    """

    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config or {})

    def forward(self, state: Tensor) -> Tensor:
        batch_size = state.size(0)
        flat = state.reshape(batch_size, -1).float()

        # All-empty boards have max 0; divide by 1 instead
        max_values = flat.max(dim=1, keepdim=True).values
        max_values = torch.where(max_values > 0, max_values, torch.ones_like(max_values))

        return flat / max_values

    def output_shape(self) -> Tuple[int, ...]:
        return (self.board_size * self.board_size,)
