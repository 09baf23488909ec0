"""
Read-only code tables used by the telegram decoder.

Tables are built once (from the bundled dictionaries or from a JSON file)
and never change afterwards. JSON files map code strings to names:

    {"251": "福島県浜通り", "300": "茨城県北部"}
"""

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from loguru import logger

from .areas import AREA_CODES
from .epicenter import EPICENTER_CODES


class CodeTable:
    """
    Immutable integer code -> name lookup.
    """

    def __init__(self, name: str, entries: Mapping[int, str]):
        self.name = name
        self._entries = MappingProxyType(dict(entries))

    def lookup(self, code: int) -> Optional[str]:
        """Return the name for a code, or None if the code is not in the table."""
        return self._entries.get(code)

    @property
    def entries(self) -> Mapping[int, str]:
        return self._entries

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"CodeTable({self.name!r}, {len(self)} entries)"

    @classmethod
    def from_json(cls, name: str, path: Union[str, Path]) -> 'CodeTable':
        """
        Load a code table from a JSON object file.

        Args:
            name: Table name, used in error messages
            path: JSON file mapping code strings to names

        Returns:
            CodeTable instance
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a JSON object mapping codes to names")

        entries = {}
        for key, value in data.items():
            if not str(key).isdigit():
                raise ValueError(f"Invalid code in {path}: {key}")
            if not isinstance(value, str):
                raise ValueError(f"Name for code {key} in {path} must be a string")
            entries[int(key)] = value

        logger.debug("Loaded {} table from {} ({} entries)", name, path, len(entries))
        return cls(name, entries)


@dataclass(frozen=True)
class CodeTables:
    """The two lookups an EEW telegram references."""
    epicenter: CodeTable
    area: CodeTable


def load_code_tables(
    epicenter_path: Optional[Union[str, Path]] = None,
    area_path: Optional[Union[str, Path]] = None
) -> CodeTables:
    """
    Build the epicenter and region tables.

    Args:
        epicenter_path: Optional JSON file replacing the bundled epicenter table
        area_path: Optional JSON file replacing the bundled region table

    Returns:
        CodeTables instance
    """
    if epicenter_path:
        epicenter = CodeTable.from_json('epicenter', epicenter_path)
    else:
        epicenter = CodeTable('epicenter', EPICENTER_CODES)

    if area_path:
        area = CodeTable.from_json('area', area_path)
    else:
        area = CodeTable('area', AREA_CODES)

    return CodeTables(epicenter=epicenter, area=area)
