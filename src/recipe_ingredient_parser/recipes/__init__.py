"""Recipe-level helpers: multi-line parsing and tabular export."""

from .export import DATAFRAME_COLUMNS, ingredients_to_dataframe
from .parsing import multi_line_parse, split_lines

__all__ = [
    "DATAFRAME_COLUMNS",
    "ingredients_to_dataframe",
    "multi_line_parse",
    "split_lines",
]
