from .normalizer import parse_date, to_date, to_date_range

__all__ = ["parse_date", "to_date", "to_date_range"]
