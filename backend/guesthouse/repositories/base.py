"""CRUD over a single table.

Subclasses name the model, the mutable columns, which of them must be present
and the defaults used when an optional column is left out of a full replace.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, List

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from guesthouse.decoding import decode_record
from guesthouse.errors import NotFound, StorageError, ValidationError

logger = logging.getLogger(__name__)


def is_blank(value) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


@contextmanager
def storage_errors(db: Session, action: str):
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Database error while %s", action)
        raise StorageError() from e


class Repository:
    model = None
    entity = "Record"
    fields: tuple = ()
    required: tuple = ()
    defaults: Dict[str, Any] = {}

    def __init__(self, db: Session):
        self.db = db

    @property
    def label(self) -> str:
        return self.entity.lower()

    def to_dict(self, record) -> dict:
        row = {column.name: getattr(record, column.name) for column in self.model.__table__.columns}
        return decode_record(row)

    def validate(self, fields: dict) -> dict:
        missing = [name for name in self.required if is_blank(fields.get(name))]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        values = {}
        for name in self.fields:
            value = fields.get(name)
            if isinstance(value, str):
                value = value.strip()
            if is_blank(value):
                value = self.defaults.get(name)
            values[name] = value
        return values

    def _not_found(self, record_id: int) -> NotFound:
        logger.debug("%s %s not found", self.entity, record_id)
        return NotFound(f"{self.entity} not found")

    def list(self) -> List[dict]:
        with storage_errors(self.db, f"listing {self.label} records"):
            records = self.db.query(self.model).order_by(self.model.id).all()
        return [self.to_dict(record) for record in records]

    def get(self, record_id: int) -> dict:
        with storage_errors(self.db, f"loading {self.label} {record_id}"):
            record = self.db.get(self.model, record_id)
        if record is None:
            raise self._not_found(record_id)
        return self.to_dict(record)

    def create(self, fields: dict) -> dict:
        record = self.model(**self.validate(fields))
        with storage_errors(self.db, f"creating {self.label}"):
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        logger.info("Created %s %s", self.label, record.id)
        return self.to_dict(record)

    def update(self, record_id: int, fields: dict) -> dict:
        values = self.validate(fields)
        with storage_errors(self.db, f"updating {self.label} {record_id}"):
            result = self.db.execute(
                update(self.model).where(self.model.id == record_id).values(**values)
            )
            if result.rowcount == 0:
                self.db.rollback()
                raise self._not_found(record_id)
            self.db.commit()
        logger.info("Updated %s %s", self.label, record_id)
        return self.get(record_id)

    def delete(self, record_id: int) -> None:
        with storage_errors(self.db, f"deleting {self.label} {record_id}"):
            result = self.db.execute(delete(self.model).where(self.model.id == record_id))
            if result.rowcount == 0:
                self.db.rollback()
                raise self._not_found(record_id)
            self.db.commit()
        logger.info("Deleted %s %s", self.label, record_id)
