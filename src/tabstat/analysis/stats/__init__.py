"""Correlation, regression, and hypothesis-test helpers."""

from .correlation import (
    NOT_SIGNIFICANT,
    get_corr,
    get_fields_corr_matrix,
    corr_test_sig,
    get_fields_filtered_corr_matrix,
)
from .regression import (
    LinearFit,
    Solver,
    lstsq_solver,
    get_linear_reg_points,
    get_linear_reg,
    get_linear_reg_errs,
)
from .hypothesis_tests import (
    normality_pvalue,
    ttest_pvalue,
    linreg_pvalue,
)

__all__ = [
    "NOT_SIGNIFICANT",
    "get_corr",
    "get_fields_corr_matrix",
    "corr_test_sig",
    "get_fields_filtered_corr_matrix",
    "LinearFit",
    "Solver",
    "lstsq_solver",
    "get_linear_reg_points",
    "get_linear_reg",
    "get_linear_reg_errs",
    "normality_pvalue",
    "ttest_pvalue",
    "linreg_pvalue",
]
