"""Domain entities for eye-disease records — pure Python, no framework dependencies."""

from dataclasses import dataclass
from enum import Enum


class Disease(str, Enum):
    """Closed set of eye diseases a record may carry.

    Member names double as the GraphQL enum values, hence the casing.
    """

    Bulging_Eyes = "Bulging_Eyes"
    Cataracts = "Cataracts"
    Crossed_Eyes = "Crossed_Eyes"
    Glaucoma = "Glaucoma"
    Uveitis = "Uveitis"


@dataclass
class Record:
    """A person's eye-disease entry.

    ``date_added`` is kept as a canonical ISO-8601 string
    (``YYYY-MM-DDTHH:MM:SS.mmmZ``), which is also what the API returns.
    """

    id: str
    name: str
    disease: Disease
    date_added: str

    def update(
        self,
        name: str | None = None,
        disease: Disease | None = None,
        date_added: str | None = None,
    ) -> None:
        """Overwrite the supplied fields; ``None`` leaves a field untouched."""
        if name is not None:
            self.name = name
        if disease is not None:
            self.disease = disease
        if date_added is not None:
            self.date_added = date_added


@dataclass
class DeleteResult:
    """Outcome of a delete — failure is reported here, not raised."""

    success: bool
    message: str
    removed: Record | None = None
