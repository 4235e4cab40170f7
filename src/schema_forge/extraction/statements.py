# src/schema_forge/extraction/statements.py

"""Pattern-based extraction of CREATE TABLE statements from model output.

This is a lexical scan, not a SQL parser. The text is cut into segments at
every `CREATE TABLE` keyword; a segment is a statement when it opens with
`CREATE TABLE [IF NOT EXISTS] <name> (` and has a closing parenthesis before
the next keyword. The statement text is the whole segment, verbatim, so any
trailing prose up to the next statement stays attached to it.

String literals containing the keywords or parentheses can still mis-delimit
a statement.
"""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_KEYWORD = re.compile(r"CREATE\s+TABLE", re.IGNORECASE)

_STATEMENT = re.compile(
    r"CREATE\s+TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?`?\S+?`?\s*\(.+?\)",
    re.IGNORECASE | re.DOTALL,
)

# Optional schema qualifier and quoting; the captured group is the bare name
_TABLE_NAME = re.compile(
    r"CREATE\s+TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?"
    r"(?:[`\"\[]?\w+[`\"\]]?\.)?[`\"\[]?(\w+)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class TableStatement:
    """One CREATE TABLE statement, verbatim.

    `name` is None when no identifier could be read from the statement; such
    statements get no generated code.
    """

    name: str | None
    text: str
    offset: int


def table_name(statement: str) -> str | None:
    match = _TABLE_NAME.match(statement)
    return match.group(1) if match else None


class StatementExtractor:
    def extract(self, schema_text: str) -> list[TableStatement]:
        """Return the CREATE TABLE statements of `schema_text` in source order.

        Never raises on content: no match gives an empty list.
        """
        starts = [m.start() for m in _KEYWORD.finditer(schema_text)]
        bounds = zip(starts, starts[1:] + [len(schema_text)])

        statements = []
        for start, end in bounds:
            segment = schema_text[start:end]
            if not _STATEMENT.match(segment):
                logger.debug("Skipping non-statement CREATE TABLE at offset %d", start)
                continue

            name = table_name(segment)
            if name is None:
                logger.warning(
                    "Could not read a table name from statement at offset %d: %.80r",
                    start,
                    segment,
                )
            statements.append(TableStatement(name=name, text=segment, offset=start))

        if not statements:
            logger.warning("No CREATE TABLE statements found in schema text")
        else:
            logger.info(
                "Extracted %d CREATE TABLE statements: %s",
                len(statements),
                ", ".join(s.name or "<unnamed>" for s in statements),
            )
        return statements
