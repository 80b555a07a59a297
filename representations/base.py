"""
Base Representation Interface.

Representation module interface:
- __init__(config: dict)
- forward(state: Tensor) -> Tensor
- output_shape() -> tuple

All concrete representations MUST inherit from this base class.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Tuple

import torch.nn as nn
from torch import Tensor


class Representation(nn.Module, ABC):
    """Abstract base class for input representations.

    A representation turns encoded boards (see representations.encoding)
    into the flat float input of an agent's network.

    Attributes:
        config: Configuration dictionary with representation-specific params
        board_size: Side length of the boards it accepts
    """

    def __init__(self, config: Dict[str, Any]):
        """Initialize representation.

        Args:
            config: Configuration dictionary. ``board_size`` (default 4) is
                    shared by every representation; other keys vary.
        """
        super().__init__()
        self.config = config
        self.board_size = config.get("board_size", 4)

    @abstractmethod
    def forward(self, state: Tensor) -> Tensor:
        """Transform encoded boards.

        Args:
            state: Batch of encoded boards, batch dimension first

        Returns:
            (N, D) float tensor, always flat for MLP input
        """
        pass

    @abstractmethod
    def output_shape(self) -> Tuple[int, ...]:
        """Return the output shape, excluding the batch dimension."""
        pass
