# export.py
import csv
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Union

import pandas as pd

import config
from errors import ExportFailure


@dataclass(frozen=True)
class Column:
    header: str
    accessor: Union[str, Callable[[dict], Any]]
    default: Any = ""

    def value(self, record):
        if callable(self.accessor):
            value = self.accessor(record)
        else:
            value = record.get(self.accessor)
        if value is None or value == "":
            return self.default
        return value


@dataclass(frozen=True)
class ExportResult:
    filename: str
    payload: str
    row_count: int
    mime: str = config.EXPORT_MIME

    def to_bytes(self):
        return self.payload.encode(config.EXPORT_ENCODING)


def serialize(view, columns):
    # strings always quoted, numbers never
    headers = [c.header for c in columns]
    try:
        rows = [[c.value(record) for c in columns] for record in view]
        df = pd.DataFrame(rows, columns=headers, dtype=object)
        return df.to_csv(index=False, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    except Exception as e:
        raise ExportFailure(f"Could not serialize export: {e}") from e


def export_filename(resource, today=None):
    today = today or date.today()
    return f"{resource}_{today.strftime(config.EXPORT_DATE_FORMAT)}.csv"


def build_export(view, columns, resource, today=None):
    payload = serialize(view, columns)
    return ExportResult(filename=export_filename(resource, today), payload=payload, row_count=len(view))
