"""
Output format interfaces and implementations for `version-checker`.
"""

from .columns import ColumnsFormat
from .interface import ReportFormat
from .json import JsonFormat
from .markdown import MarkdownFormat
from .table import TableFormat

__all__ = [
    "ColumnsFormat",
    "JsonFormat",
    "MarkdownFormat",
    "ReportFormat",
    "TableFormat",
]
