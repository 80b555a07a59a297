"""Tests for the NormalizedRepresentation."""

import pytest
import torch

from lib2048.board import Board
from representations.encoding import grids_to_tensor
from representations.normalized import NormalizedRepresentation


class TestNormalizedRepresentation:
    """Tests for per-board max normalization."""

    @pytest.fixture
    def rep(self):
        return NormalizedRepresentation()

    def test_output_shape_method(self, rep):
        assert rep.output_shape() == (16,)

    def test_scales_by_board_max(self, rep):
        grids = grids_to_tensor([
            {"rows": [[0, 1], [2, 4]]},
            {"rows": [[3, 3], [0, 0]]},
        ])
        output = rep(grids)

        assert output.shape == (2, 4)
        assert output[0].tolist() == [0.0, 0.25, 0.5, 1.0]
        assert output[1].tolist() == [1.0, 1.0, 0.0, 0.0]

    def test_empty_board_stays_zero(self, rep):
        output = rep(grids_to_tensor([Board.new_empty()]))
        assert torch.count_nonzero(output).item() == 0
        assert not torch.isnan(output).any()
