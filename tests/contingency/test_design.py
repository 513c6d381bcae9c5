"""
Tests for ContingencyDesign, DivergenceSolution and the helper functions.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pydivergence import (
    DimensionError,
    InvalidInputError,
    degrees_of_freedom,
    expected_frequencies,
    power_divergence,
)
from pydivergence.contingency import LAMBDA_NAMES, ContingencyDesign


class TestContingencyDesign:

    def test_for_table_defaults(self, table_2x2):
        design = ContingencyDesign.for_table(table_2x2)
        assert design.lambda_ == 1.0
        assert design.min_freq == 5.0
        assert design.shape == (2, 2)
        assert design.levels is None
        assert design.data_name == "x"
        assert design.table.dtype == np.float64

    @pytest.mark.parametrize("name,value", list(LAMBDA_NAMES.items()))
    def test_lambda_names(self, table_2x2, name, value):
        assert ContingencyDesign.for_table(table_2x2, lambda_=name).lambda_ == value

    def test_unknown_lambda_name(self, table_2x2):
        with pytest.raises(InvalidInputError, match="Valid strings are"):
            ContingencyDesign.for_table(table_2x2, lambda_="pearsons")

    def test_for_observations(self):
        design = ContingencyDesign.for_observations(
            [1, 1, 2, 2], [1, 2, 1, 2], range(1, 3), lambda_=0
        )
        assert design.levels == (1, 2)
        assert design.data_name == "x and y"
        assert_allclose(design.table, [[1, 1], [1, 1]])

    def test_for_observations_single_level_rejected(self):
        with pytest.raises(DimensionError, match="greater than 1"):
            ContingencyDesign.for_observations([1, 1], [1, 1], [1])

    def test_for_observations_all_out_of_range(self):
        with pytest.raises(InvalidInputError, match="at least one entry"):
            ContingencyDesign.for_observations([7, 8], [7, 8], range(1, 3))

    def test_repr(self, table_2x2):
        assert "table=(2, 2)" in repr(ContingencyDesign.for_table(table_2x2))


class TestSolutionSummary:

    def test_summary_valid(self, table_2x2):
        text = power_divergence(table_2x2).summary()
        assert "Pearson's chi-squared" in text
        assert "data:  x" in text
        assert "statistic = 8.3333, df = 1, n = 50" in text
        assert "Warning" not in text

    def test_summary_nan(self, sparse_table):
        text = power_divergence(sparse_table).summary()
        assert "statistic = NaN" in text
        assert "Warning: Min frequency requirement violated" in text

    def test_summary_observations(self):
        text = power_divergence([1, 1, 2, 2] * 5, [1, 2, 1, 2] * 5, range(1, 3)).summary()
        assert "data:  x and y" in text

    def test_summary_unnamed_lambda(self, table_2x2):
        text = power_divergence(table_2x2, lambda_=1.5).summary()
        assert "power divergence (lambda = 1.5)" in text

    def test_repr(self, table_2x2):
        assert repr(power_divergence(table_2x2)).startswith("DivergenceSolution(lambda_=1")


class TestHelpers:

    def test_expected_frequencies(self, table_2x2):
        assert_allclose(expected_frequencies(table_2x2), [[15, 15], [10, 10]], rtol=1e-12)

    def test_expected_preserves_margins(self, table_3x4):
        e = expected_frequencies(table_3x4)
        assert_allclose(e.sum(axis=0), table_3x4.sum(axis=0), rtol=1e-12)
        assert_allclose(e.sum(axis=1), table_3x4.sum(axis=1), rtol=1e-12)

    def test_degrees_of_freedom(self, table_3x4):
        assert degrees_of_freedom(table_3x4) == 6
        assert degrees_of_freedom([[1, 2], [3, 4]]) == 1

    def test_helpers_validate(self):
        with pytest.raises(InvalidInputError):
            expected_frequencies([[0, 0], [0, 0]])
        with pytest.raises(InvalidInputError):
            degrees_of_freedom([1, 2, 3])
