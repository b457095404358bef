from .provider import NAMED_FIELDS, field_strings, language_of, month_name, name_table, weekday_name
from .tables import NameTable

__all__ = [
    "NAMED_FIELDS",
    "NameTable",
    "field_strings",
    "language_of",
    "month_name",
    "name_table",
    "weekday_name",
]
