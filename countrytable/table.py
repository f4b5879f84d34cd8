from typing import Any, Dict, Iterator, List


class ColumnTable:
    def __init__(self, data: Dict[str, List[Any]]):
        bad = [name for name, values in data.items() if not isinstance(values, list)]
        if bad:
            raise TypeError(f"Columns must be lists; not a list: {bad}")

        lengths = {name: len(values) for name, values in data.items()}
        if len(set(lengths.values())) > 1:
            raise ValueError(f"Ragged columns, row counts differ: {lengths}")

        self._data = data
        self._num_rows = next(iter(lengths.values()), 0)

    @property
    def columns(self) -> List[str]:
        return list(self._data.keys())

    def __len__(self) -> int:
        return self._num_rows

    def missing(self, columns: List[str]) -> List[str]:
        return [c for c in columns if c not in self._data]

    def select(self, columns: List[str]) -> 'ColumnTable':
        if not columns:
            raise ValueError("Cannot select zero columns. Provide at least one column name.")
        absent = self.missing(columns)
        if absent:
            raise KeyError(f"Columns not found: {absent}. Available: {self.columns}")
        return ColumnTable({c: self._data[c][:] for c in columns})

    def filter(self, mask: List[bool]) -> 'ColumnTable':
        if len(mask) != self._num_rows:
            raise ValueError(f"Mask has {len(mask)} entries for {self._num_rows} rows.")
        return ColumnTable({
            name: [v for v, keep in zip(values, mask) if keep]
            for name, values in self._data.items()
        })

    def rows(self) -> Iterator[Dict[str, Any]]:
        cols = self.columns
        for values in zip(*(self._data[c] for c in cols)):
            yield dict(zip(cols, values))
