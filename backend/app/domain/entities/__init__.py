from .record import DeleteResult, Disease, Record

__all__ = [
    "DeleteResult",
    "Disease",
    "Record",
]
