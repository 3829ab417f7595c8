"""
Data Sources

Adapters between the admin core and where records actually live. Every
failure is raised as DataSourceError carrying a message that can be shown
to the admin as-is.
"""

import copy
import logging
from contextlib import contextmanager
from datetime import date, datetime

from sqlalchemy import Date, DateTime
from sqlalchemy.exc import SQLAlchemyError

from bighits.core.errors import DataSourceError

logger = logging.getLogger(__name__)


class InMemoryDataSource:
    """List-backed data source for fixtures and tests."""

    def __init__(self, records=(), label='Record'):
        self.label = label
        self._records = [copy.deepcopy(r) for r in records]
        ids = [r['id'] for r in self._records if isinstance(r.get('id'), int)]
        self._next_id = max(ids, default=0) + 1

    def _get(self, record_id):
        for record in self._records:
            if record.get('id') == record_id:
                return record
        raise DataSourceError(f'{self.label} {record_id} not found')

    def fetch_all(self):
        return [copy.deepcopy(r) for r in self._records]

    def fetch_by_id(self, record_id):
        return copy.deepcopy(self._get(record_id))

    def save(self, draft):
        record_id = draft.get('id')
        slug = draft.get('slug')
        for other in self._records:
            if slug and other.get('slug') == slug and other.get('id') != record_id:
                raise DataSourceError(f'A {self.label.lower()} with slug "{slug}" already exists')

        if record_id is None:
            record = dict(draft, id=self._next_id)
            self._next_id += 1
            self._records.append(record)
        else:
            record = self._get(record_id)
            record.update(draft)
        return copy.deepcopy(record)

    def update_published(self, record_id, value):
        self._get(record_id)['published'] = bool(value)

    def delete(self, record_id):
        record = self._get(record_id)
        self._records.remove(record)


class SQLAlchemyDataSource:
    """Data source over a Flask-SQLAlchemy model exposing `to_record()`.

    Every session access runs inside `_session_errors`, so a database
    failure rolls the session back and surfaces as DataSourceError.
    """

    def __init__(self, model, db, label=None):
        self.model = model
        self.db = db
        self.label = label or model.__name__
        self._columns = {c.name: c for c in model.__table__.columns}

    @contextmanager
    def _session_errors(self, action):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.exception('Could not %s %s', action, self.label)
            raise DataSourceError(f'Could not {action} {self.label.lower()}: {e}') from e

    def _get(self, record_id, action='load'):
        with self._session_errors(action):
            obj = self.db.session.get(self.model, record_id)
        if obj is None:
            raise DataSourceError(f'{self.label} {record_id} not found')
        return obj

    def fetch_all(self):
        with self._session_errors('load'):
            objs = self.model.query.order_by(self.model.id).all()
            return [obj.to_record() for obj in objs]

    def fetch_by_id(self, record_id):
        obj = self._get(record_id)
        with self._session_errors('load'):
            return obj.to_record()

    def save(self, draft):
        record_id = draft.get('id')
        slug = draft.get('slug')
        with self._session_errors('save'):
            query = self.model.query.filter(self.model.slug == slug)
            if record_id is not None:
                query = query.filter(self.model.id != record_id)
            clash = query.first()
        if clash is not None:
            raise DataSourceError(f'A {self.label.lower()} with slug "{slug}" already exists')

        obj = self._get(record_id, 'save') if record_id is not None else self.model()
        values = {}
        for name, value in draft.items():
            if name == 'id' or name not in self._columns:
                continue
            values[name] = self._convert(self._columns[name], value)

        with self._session_errors('save'):
            for name, value in values.items():
                setattr(obj, name, value)
            if record_id is None:
                self.db.session.add(obj)
            self.db.session.commit()
            return obj.to_record()

    def update_published(self, record_id, value):
        obj = self._get(record_id, 'update')
        with self._session_errors('update'):
            obj.published = bool(value)
            self.db.session.commit()

    def delete(self, record_id):
        obj = self._get(record_id, 'delete')
        with self._session_errors('delete'):
            self.db.session.delete(obj)
            self.db.session.commit()

    @staticmethod
    def _convert(column, value):
        if value == '' and column.nullable:
            return None
        if not isinstance(value, str) or not value:
            return value
        try:
            if isinstance(column.type, DateTime):
                return datetime.fromisoformat(value)
            if isinstance(column.type, Date):
                return date.fromisoformat(value)
        except ValueError as e:
            raise DataSourceError(f'Invalid {column.name}: {value!r}') from e
        return value
