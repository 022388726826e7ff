from .record_repository import InMemoryRecordRepository
from .seed import SEED_ROWS, seed_records

__all__ = [
    "InMemoryRecordRepository",
    "SEED_ROWS",
    "seed_records",
]
