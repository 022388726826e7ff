from .record import RecordCreate, RecordUpdate

__all__ = [
    "RecordCreate",
    "RecordUpdate",
]
