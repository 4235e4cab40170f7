from .code_blocks import first_code_block
from .statements import StatementExtractor, TableStatement, table_name

__all__ = [
    "StatementExtractor",
    "TableStatement",
    "first_code_block",
    "table_name",
]
