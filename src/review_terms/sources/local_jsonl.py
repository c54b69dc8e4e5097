"""Local JSONL source.

Each line is a JSON object; the text lives under `text_field`. Blank lines are
skipped. A record without the field counts as a non-string value (see the
`on_invalid` policy), but a file where no record has it is an InputError.
"""

from __future__ import annotations
import json
import os
from typing import Any, List

from ..errors import InputError
from .base import DataSource

_MISSING = object()


class LocalJSONLSource(DataSource):
    kind = "local_jsonl"

    def read_column(self) -> List[Any]:
        path = self.spec.dataset
        if not os.path.isfile(path):
            raise InputError(f"Source {self.name}: file not found: {path}")

        values: List[Any] = []
        with open(path, "r", encoding=self.spec.encoding) as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    ex = json.loads(line)
                except json.JSONDecodeError as e:
                    raise InputError(f"Source {self.name}: invalid JSON in {path}:{line_num}: {e}") from e
                values.append(ex.get(self.spec.text_field, _MISSING) if isinstance(ex, dict) else _MISSING)

        if values and all(v is _MISSING for v in values):
            raise InputError(f"Source {self.name}: no record in {path} has a '{self.spec.text_field}' field")
        return [None if v is _MISSING else v for v in values]
