"""
One-Hot Representation (Pass-Through).

This representation simply flattens the (N, S*S, V) one-hot encoding from
encode_boards() to (N, S*S*V) for direct use by MLP networks.
"""

from typing import Dict, Any, Tuple

import torch
from torch import Tensor

from representations.base import Representation
from representations.encoding import DEFAULT_MAX_VALUE


class OneHotRepresentation(Representation):
    """Pass-through representation that flattens one-hot state.

    Input: (N, S*S, V) one-hot boolean from encode_boards()
    Output: (N, S*S*V) flattened float tensor

    No learnable parameters.
    """

    def __init__(self, config: Dict[str, Any] = None):
        """Initialize one-hot representation.

        Args:
            config: Optional configuration with ``board_size`` (default 4)
                    and ``max_value`` (default 17)
        """
        super().__init__(config or {})
        self.max_value = self.config.get("max_value", DEFAULT_MAX_VALUE)

    def forward(self, state: Tensor) -> Tensor:
        """Flatten one-hot state.

        Args:
            state: (N, S*S, V) one-hot encoded board states

        Returns:
            (N, S*S*V) flattened float tensor
        """
        batch_size = state.size(0)

        flat = state.reshape(batch_size, -1)

        # Convert to float if boolean
        if flat.dtype == torch.bool:
            flat = flat.float()

        return flat

    def output_shape(self) -> Tuple[int, ...]:
        return (self.board_size * self.board_size * self.max_value,)
