"""Bulk country resolution over pandas DataFrames."""

from country_parser.transformations.countries import resolve_country_column, unresolved_values

__all__ = ["resolve_country_column", "unresolved_values"]
