"""CSV source.

Reads the file with pandas, every column as string and with NA detection off,
so an empty cell is an empty review rather than NaN.
"""

from __future__ import annotations
import os
from typing import Any, Dict, List
import pandas as pd

from ..errors import InputError
from .base import DataSource


class CSVSource(DataSource):
    kind = "csv"

    def _read(self) -> pd.DataFrame:
        path = self.spec.dataset
        if not os.path.isfile(path):
            raise InputError(f"Source {self.name}: file not found: {path}")
        opts = {"dtype": str, "keep_default_na": False, **self.spec.options}
        try:
            return pd.read_csv(path, encoding=self.spec.encoding, **opts)
        except pd.errors.EmptyDataError as e:
            raise InputError(f"Source {self.name}: {path} is empty") from e

    def metadata(self) -> Dict[str, Any]:
        meta = super().metadata()
        if os.path.exists(self.spec.dataset):
            meta["size_bytes"] = os.path.getsize(self.spec.dataset)
        return meta

    def read_column(self) -> List[Any]:
        df = self._read()
        if self.spec.text_field not in df.columns:
            raise InputError(
                f"Source {self.name}: no '{self.spec.text_field}' column in {self.spec.dataset} "
                f"(columns: {list(df.columns)})"
            )
        return df[self.spec.text_field].tolist()
