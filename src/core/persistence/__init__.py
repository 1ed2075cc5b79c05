"""
Persistence — JSON-совместимые записи DecimalFloat
"""

from src.core.persistence.records import (
    DecimalFloatRecord,
    dumps_record,
    from_record,
    from_records,
    loads_record,
    to_record,
    to_records,
)

__all__ = [
    "DecimalFloatRecord",
    "dumps_record",
    "from_record",
    "from_records",
    "loads_record",
    "to_record",
    "to_records",
]
