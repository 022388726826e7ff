"""Fixed dataset loaded into every new record store."""

from app.domain.entities import Disease, Record

SEED_ROWS: tuple[tuple[str, str, Disease, str], ...] = (
    ("1", "Aarav", Disease.Cataracts, "2025-01-05T09:10:00.000Z"),
    ("2", "Ananya", Disease.Glaucoma, "2025-01-06T11:22:00.000Z"),
    ("3", "Rahul", Disease.Uveitis, "2025-01-07T14:05:00.000Z"),
    ("4", "Sneha", Disease.Crossed_Eyes, "2025-01-08T08:45:00.000Z"),
    ("5", "Neha", Disease.Bulging_Eyes, "2025-01-09T12:30:00.000Z"),
    ("6", "Vikram", Disease.Cataracts, "2025-01-10T16:40:00.000Z"),
    ("7", "Kiran", Disease.Glaucoma, "2025-01-11T10:15:00.000Z"),
    ("8", "Isha", Disease.Uveitis, "2025-01-12T07:55:00.000Z"),
    ("9", "Rohan", Disease.Crossed_Eyes, "2025-01-13T18:05:00.000Z"),
    ("10", "Priya", Disease.Bulging_Eyes, "2025-01-14T09:00:00.000Z"),
    ("11", "Aditi", Disease.Glaucoma, "2025-01-15T13:25:00.000Z"),
    ("12", "Sahil", Disease.Cataracts, "2025-01-16T17:45:00.000Z"),
    ("13", "Kavya", Disease.Uveitis, "2025-01-17T06:35:00.000Z"),
    ("14", "Dev", Disease.Crossed_Eyes, "2025-01-18T20:10:00.000Z"),
    ("15", "Meera", Disease.Bulging_Eyes, "2025-01-19T08:20:00.000Z"),
    ("16", "Arjun", Disease.Glaucoma, "2025-01-20T15:55:00.000Z"),
    ("17", "Diya", Disease.Cataracts, "2025-01-21T11:05:00.000Z"),
    ("18", "Nikhil", Disease.Uveitis, "2025-01-22T12:45:00.000Z"),
    ("19", "Tanvi", Disease.Crossed_Eyes, "2025-01-23T07:15:00.000Z"),
    ("20", "Ishan", Disease.Bulging_Eyes, "2025-01-24T19:30:00.000Z"),
)


def seed_records() -> list[Record]:
    """Fresh ``Record`` instances for the seed rows (callers may mutate them)."""
    return [
        Record(id=record_id, name=name, disease=disease, date_added=date_added)
        for record_id, name, disease, date_added in SEED_ROWS
    ]
