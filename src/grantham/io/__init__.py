"""Input/output utilities."""

from grantham.io.output import OutputFormat, format_codes, format_matrix, format_result

__all__ = ["OutputFormat", "format_codes", "format_matrix", "format_result"]
