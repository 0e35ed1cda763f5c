"""README table rendering and splicing."""

from .splice import splice_table
from .table import escape_cell, render_row, render_table, truncate_cell

__all__ = ["escape_cell", "render_row", "render_table", "splice_table", "truncate_cell"]
