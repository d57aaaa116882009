"""
Record store backed by Flask-SQLAlchemy

Every call commits on its own; nothing spans more than one call.
"""

from typing import Any, Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from school_clearance.models.student import db, Student
from school_clearance.models.clearance import Department, ClearanceItem, StudentClearance
from school_clearance.utils.exceptions import NotFoundError, StoreError


class SQLAlchemyRecordStore:
    """Document-style access to the clearance tables"""

    MODELS = {
        'departments': Department,
        'clearance_items': ClearanceItem,
        'student_clearances': StudentClearance,
        'students': Student,
    }

    def __init__(self, database=None):
        self.db = database or db

    def _model(self, kind: str):
        try:
            return self.MODELS[kind]
        except KeyError:
            raise ValueError(f"Unknown record kind: {kind}")

    def _commit(self, action: str) -> None:
        try:
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise StoreError(f"Failed to {action}: {str(e)}")

    def _load(self, kind: str, record_id: int):
        model = self._model(kind)
        try:
            return self.db.session.get(model, record_id)
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise StoreError(f"Failed to read {kind} {record_id}: {str(e)}")

    def insert(self, kind: str, fields: Dict[str, Any]) -> int:
        """
        Insert a record

        Args:
            kind: Record kind, e.g. 'departments'
            fields: Column values

        Returns:
            Id of the new record
        """
        model = self._model(kind)
        record = model(**fields)
        self.db.session.add(record)
        self._commit(f"insert into {kind}")
        return record.id

    def patch(self, kind: str, record_id: int, fields: Dict[str, Any]) -> None:
        """Overwrite the given fields of an existing record"""
        record = self._load(kind, record_id)
        if record is None:
            raise NotFoundError(f"{kind} {record_id} not found")
        for name, value in fields.items():
            setattr(record, name, value)
        self._commit(f"update {kind} {record_id}")

    def delete(self, kind: str, record_id: int) -> None:
        """Delete a record by id"""
        record = self._load(kind, record_id)
        if record is None:
            raise NotFoundError(f"{kind} {record_id} not found")
        self.db.session.delete(record)
        self._commit(f"delete {kind} {record_id}")

    def get(self, kind: str, record_id: int) -> Optional[Dict[str, Any]]:
        """Get one record as a dict, or None if it does not exist"""
        record = self._load(kind, record_id)
        return record.to_dict() if record else None

    def collect(self, kind: str, **filters: Any) -> List[Dict[str, Any]]:
        """
        Collect records matching equality filters, in insertion order

        Args:
            kind: Record kind
            **filters: Column equality filters

        Returns:
            List of record dicts
        """
        model = self._model(kind)
        try:
            records = model.query.filter_by(**filters).order_by(model.id).all()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise StoreError(f"Failed to read {kind}: {str(e)}")
        return [record.to_dict() for record in records]
