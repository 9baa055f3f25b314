from .normalizer import MONTHS, extract_year, format_gedcom_date

__all__ = ["MONTHS", "extract_year", "format_gedcom_date"]
