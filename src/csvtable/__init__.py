"""csvtable: render CSV-like text as an aligned terminal table."""

from .core import render_table
from .models import TableConfig

__all__ = ["__version__", "TableConfig", "render_table"]

__version__ = "0.1.0"
