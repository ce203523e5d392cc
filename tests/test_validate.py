"""Tests for compare_table.core.validate — matrix shape and baseline cell checks."""

import pytest
from compare_table import registry
from compare_table.core.errors import (
    BadBaselineCell,
    MatrixShapeError,
    RaggedBaselineRow,
    RaggedDataRow,
    RowCountMismatch,
)
from compare_table.core.types import ColourMode
from compare_table.core.validate import check_baseline_cells, validate


class TestValidate:
    def test_row_count_mismatch(self):
        result = validate([[1, 2], [3, 4]], [[0, 0]])
        assert not result
        assert result.reason == 'RowCountMismatch'
        assert result.row is None

    def test_ragged_data_row(self):
        result = validate([[1, 2], [3]], [[0, 0], [0, 0]])
        assert not result.ok
        assert result.reason == 'RaggedDataRow'
        assert result.row == 1

    def test_ragged_baseline_row(self):
        result = validate([[1, 2], [3, 4]], [[0, 0], [0]])
        assert result.reason == 'RaggedBaselineRow'
        assert result.row == 1

    def test_baseline_wider_than_data(self):
        result = validate([[1, 2]], [[0, 0, 0]])
        assert result.reason == 'RaggedBaselineRow'
        assert result.row == 0

    def test_valid(self):
        result = validate([[1, 2], [3, 4]], [[0, 0], [0, 0]])
        assert result
        assert result.reason is None

    def test_empty(self):
        assert validate([], []).ok

    def test_empty_rows(self):
        assert validate([[], []], [[], []]).ok

    def test_empty_data_non_empty_baseline(self):
        assert validate([], [[1]]).reason == 'RowCountMismatch'

    def test_does_not_mutate(self):
        data = [[1, 2], [3]]
        baseline = [[0, 0], [0, 0]]
        validate(data, baseline)
        assert data == [[1, 2], [3]]
        assert baseline == [[0, 0], [0, 0]]

    def test_tuples_accepted(self):
        assert validate(((1, 2),), ((None, 3),)).ok


class TestRaiseForReason:
    def test_ok_is_noop(self):
        validate([[1]], [[1]]).raise_for_reason()

    @pytest.mark.parametrize(
        ('data', 'baseline', 'exc'),
        [
            ([[1, 2], [3, 4]], [[0, 0]], RowCountMismatch),
            ([[1, 2], [3]], [[0, 0], [0, 0]], RaggedDataRow),
            ([[1, 2], [3, 4]], [[0, 0], [0]], RaggedBaselineRow),
        ],
    )
    def test_classified(self, data, baseline, exc) -> None:
        with pytest.raises(exc) as info:
            validate(data, baseline).raise_for_reason()
        assert isinstance(info.value, MatrixShapeError)
        assert isinstance(info.value, ValueError)
        assert info.value.reason == exc.__name__

    def test_message_names_row(self):
        with pytest.raises(RaggedDataRow, match=r'row 1'):
            validate([[1, 2], [3]], [[0, 0], [0, 0]]).raise_for_reason()


class TestCheckBaselineCells:
    def test_binary_accepts_numbers_and_null(self):
        check_baseline_cells([[1, 2.5, None]], registry.resolve(ColourMode.BINARY))

    def test_binary_rejects_pair(self):
        with pytest.raises(BadBaselineCell) as info:
            check_baseline_cells([[1, (2, 3)]], registry.resolve(ColourMode.BINARY))
        assert (info.value.row, info.value.col) == (0, 1)

    def test_binary_rejects_bool_and_string(self):
        for cell in (True, '3'):
            with pytest.raises(BadBaselineCell):
                check_baseline_cells([[cell]], registry.resolve(ColourMode.BINARY))

    def test_linear_accepts_pairs_and_null(self):
        check_baseline_cells([[(0, 1), [2, 0.5]], [None, (-1, 3)]], registry.resolve(ColourMode.LINEAR))

    def test_linear_rejects_scalar(self):
        with pytest.raises(BadBaselineCell) as info:
            check_baseline_cells([[(0, 1)], [5]], registry.resolve(ColourMode.LINEAR))
        assert (info.value.row, info.value.col) == (1, 0)

    def test_linear_rejects_non_positive_spread(self):
        for cell in ((0, 0), (0, -2)):
            with pytest.raises(BadBaselineCell):
                check_baseline_cells([[cell]], registry.resolve(ColourMode.LINEAR))

    def test_linear_rejects_wrong_length(self):
        with pytest.raises(BadBaselineCell):
            check_baseline_cells([[(0, 1, 2)]], registry.resolve(ColourMode.LINEAR))
