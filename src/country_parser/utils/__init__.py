"""Utility modules for country-parser."""

from country_parser.utils.validators import validate_data_quality

__all__ = ["validate_data_quality"]
