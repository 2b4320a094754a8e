"""Auxiliary analysis tools built on third-party readability formulas."""

from .readability_formula_estimator import readability_formula_estimator

__all__ = ["readability_formula_estimator"]
