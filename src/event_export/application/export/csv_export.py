"""Application export – CsvEncoder."""
from __future__ import annotations

import csv
import io
import itertools
from typing import Any, Iterable, Mapping, Sequence

__all__ = ["CsvEncoder"]


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


class CsvEncoder:
    """Serialises flat rows into CSV text (in-memory).

    Quoting follows :data:`csv.QUOTE_MINIMAL`: fields holding the delimiter,
    the quote character or a line break are quoted and embedded quotes are
    doubled.
    """

    def __init__(
        self,
        delimiter: str = ",",
        quoting: int = csv.QUOTE_MINIMAL,
        *,
        bom: bool = False,
        lineterminator: str = "\r\n",
    ) -> None:
        self._delimiter = delimiter
        self._quoting = quoting
        self._bom = bom
        self._lineterminator = lineterminator

    def encode(
        self,
        rows: Iterable[Mapping[str, Any]],
        header: Sequence[str] | None = None,
    ) -> str:
        """Return the CSV document for *rows*.

        The header is *header* when given, else the keys of the first row.
        With no rows the result is a header-only document, or ``""`` when
        there is no header either.
        """
        iterator = iter(rows)
        first = next(iterator, None)
        if header is None:
            header = list(first.keys()) if first is not None else []
        if not header:
            return ""

        buf = io.StringIO()
        if self._bom:
            buf.write("\ufeff")  # BOM for Excel compatibility

        writer = csv.writer(
            buf,
            delimiter=self._delimiter,
            quoting=self._quoting,
            lineterminator=self._lineterminator,
        )
        writer.writerow(header)
        if first is not None:
            for row in itertools.chain((first,), iterator):
                writer.writerow([_cell(row.get(col)) for col in header])
        return buf.getvalue()

    def export(
        self,
        rows: Iterable[Mapping[str, Any]],
        header: Sequence[str] | None = None,
    ) -> bytes:
        """Return the CSV document as UTF-8 bytes."""
        return self.encode(rows, header).encode("utf-8")
