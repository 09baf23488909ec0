# JMA code tables referenced by EEW telegrams
from .epicenter import EPICENTER_CODES, get_epicenter_name
from .areas import AREA_CODES, get_area_name
from .tables import CodeTable, CodeTables, load_code_tables

__all__ = [
    'EPICENTER_CODES', 'get_epicenter_name',
    'AREA_CODES', 'get_area_name',
    'CodeTable', 'CodeTables', 'load_code_tables'
]
