from pathlib import Path
from typing import Dict, List, Optional, Union


def to_number(value: Optional[str]) -> Union[int, float, None]:
    # Parse an integer or decimal cell, None for a blank one
    if value is None or value.strip() == '':
        return None
    text = value.strip().replace('_', '')
    try:
        return int(text)
    except ValueError:
        return float(text)


def split_line(line: str, sep: str = ',') -> List[str]:
    # Quote-aware split; a doubled quote inside quotes is a literal quote
    fields = []
    buf = []
    quoted = False
    chars = iter(enumerate(line))

    for i, ch in chars:
        if ch == '"':
            if quoted and line[i + 1:i + 2] == '"':
                buf.append('"')
                next(chars)
            else:
                quoted = not quoted
        elif ch == sep and not quoted:
            fields.append(''.join(buf))
            buf = []
        else:
            buf.append(ch)

    if quoted:
        raise ValueError(f"Unterminated quoted field in line: {line!r}")
    fields.append(''.join(buf))
    return fields


def read_columns(file_path: Union[str, Path], separator: str = ',', encoding: str = 'utf-8') -> Dict[str, List[Optional[str]]]:
    """Read a delimited text file into a column-major dict of strings.

    Blank cells become ``None``. Short rows are padded and long rows are
    truncated to the header width. Blank lines and lines starting with ``#``
    are skipped. Values are left as text; callers convert the columns they
    know to be numeric.
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"File {path} not found")

    if path.stat().st_size == 0:
        return {}

    with open(path, 'r', encoding=encoding, newline='') as f:
        headers = [h.strip() for h in split_line(f.readline().lstrip('\ufeff').rstrip('\r\n'), separator)]
        duplicates = sorted({h for h in headers if headers.count(h) > 1})
        if duplicates:
            raise ValueError(f"Duplicate column names in header: {duplicates}")
        columns: Dict[str, List[Optional[str]]] = {h: [] for h in headers}
        width = len(headers)

        for raw in f:
            line = raw.rstrip('\r\n')
            if not line.strip() or line.startswith('#'):
                continue
            values = split_line(line, separator)
            values = (values + [''] * width)[:width]
            for header, value in zip(headers, values):
                columns[header].append(value if value != '' else None)

    return columns
