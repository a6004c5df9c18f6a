# Makes the folder importable as a package.

from .table import output_path, render_table, write_table

__all__ = ["output_path", "render_table", "write_table"]
