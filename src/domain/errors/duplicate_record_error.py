"""Raised by repositories when an insert collides with an existing row."""


class DuplicateRecordError(Exception):
    """A uniqueness rule rejected the write.

    Handlers check for duplicates before saving, but two requests can pass
    that check together. The repository rolls back and raises this in place
    of the driver's IntegrityError, so the handler can answer with its own
    conflict message without depending on SQLAlchemy.
    """
