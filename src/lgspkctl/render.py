"""Human-readable dump of a response ``data`` object."""

import json
import sys
from typing import Any, Dict, Iterable, List, Mapping, Optional, TextIO

from .const import DEFAULT_ASSOCIATIONS, Association, LookupTable

INDENT = "\t"


def _scalar(value: Any) -> str:
    if isinstance(value, str):
        return value
    # numbers from response.loads carry their source text
    raw = getattr(value, "raw", None)
    if raw is not None:
        return raw
    # true / false / null / plain numbers in JSON spelling
    return json.dumps(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ResponseRenderer:
    """Renders one line per field, substituting labels for known codes."""

    def __init__(self, associations: Iterable[Association] = DEFAULT_ASSOCIATIONS):
        self.associations = tuple(associations)

    def _tables(self, kind: str):
        selectors: Dict[str, LookupTable] = {}
        lists: Dict[str, LookupTable] = {}
        for assoc in self.associations:
            if assoc.kind == kind:
                selectors[assoc.selector] = assoc.table
                lists[assoc.list_field] = assoc.table
        return selectors, lists

    def render(self, kind: str, data: Mapping[str, Any], depth: int = 1) -> List[str]:
        selectors, lists = self._tables(kind)
        lines: List[str] = []
        self._object(data, depth, selectors, lists, lines)
        return lines

    def dump(self, kind: str, data: Mapping[str, Any], file: Optional[TextIO] = None) -> None:
        out = file if file is not None else sys.stdout
        for line in self.render(kind, data):
            print(line, file=out)

    def _object(self, obj, depth, selectors, lists, lines) -> None:
        pad = INDENT * depth
        for name, value in obj.items():
            if isinstance(value, dict):
                lines.append(f"{pad}{name}: object")
                self._object(value, depth + 1, selectors, lists, lines)
            elif isinstance(value, list):
                lines.append(f"{pad}{name}: array")
                self._array(value, depth + 1, lists.get(name), selectors, lists, lines)
            elif _is_number(value) and name in selectors:
                label = selectors[name].label(value)
                if label is None:
                    lines.append(f"{pad}{name}: {_scalar(value)}")
                else:
                    lines.append(f"{pad}{name}: {_scalar(value)} - {label}")
            else:
                lines.append(f"{pad}{name}: {_scalar(value)}")

    def _array(self, items, depth, table, selectors, lists, lines) -> None:
        pad = INDENT * depth
        for value in items:
            if isinstance(value, dict):
                lines.append(f"{pad}object")
                self._object(value, depth + 1, selectors, lists, lines)
            elif isinstance(value, list):
                lines.append(f"{pad}array")
                self._array(value, depth + 1, None, selectors, lists, lines)
            elif _is_number(value) and table is not None and table.label(value) is not None:
                lines.append(f"{pad}{_scalar(value):<2}: {table.label(value)}")
            else:
                lines.append(f"{pad}{_scalar(value)}")
