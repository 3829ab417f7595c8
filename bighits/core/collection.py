"""
Collection View Controller

Generic state behind every admin list screen. One controller owns a working
copy of one collection for the lifetime of a view; search and sort are
computed locally, while publish toggles and deletes are forwarded to the
data source as mutation commands and reconciled when they settle.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from bighits.core.errors import DataSourceError, MutationInProgress
from bighits.core.resources import NUMBER

logger = logging.getLogger(__name__)

ASC = 'asc'
DESC = 'desc'


class ViewState(str, Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    READY = 'ready'
    MUTATING = 'mutating'
    ERROR = 'error'


class MutationStatus(str, Enum):
    PENDING = 'pending'
    COMMITTED = 'committed'
    REJECTED = 'rejected'


@dataclass
class Mutation:
    """A toggle or delete sent to the data source."""
    kind: str
    record_id: object
    status: MutationStatus = MutationStatus.PENDING
    error: Optional[str] = None

    def commit(self):
        self.status = MutationStatus.COMMITTED

    def reject(self, message):
        self.status = MutationStatus.REJECTED
        self.error = message

    @property
    def settled(self):
        return self.status is not MutationStatus.PENDING


@dataclass(frozen=True)
class SortSpec:
    field: str
    direction: str = ASC

    def flipped(self):
        return SortSpec(self.field, DESC if self.direction == ASC else ASC)


def searchable_text(value):
    """String form used for search; integral floats drop their '.0'."""
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def filter_records(records, term, fields):
    """Keep records where `term` occurs, case-insensitively, in any of `fields`."""
    needle = (term or '').casefold()
    if not needle:
        return list(records)
    return [
        record for record in records
        if any(needle in searchable_text(record.get(f)).casefold() for f in fields)
    ]


def _as_number(value):
    if isinstance(value, bool):
        return float(value)
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def sort_records(records, spec, sort_types):
    """Stable sort; numeric fields compare numerically, the rest as strings.

    Missing values come first in ascending order.
    """
    numeric = sort_types.get(spec.field) == NUMBER

    def key(record):
        value = record.get(spec.field)
        if numeric:
            value = _as_number(value)
        elif value is not None:
            value = str(value)
        return (value is not None, value if value is not None else 0)

    # sorted() keeps equal keys in input order even with reverse=True
    return sorted(records, key=key, reverse=spec.direction == DESC)


def _decline(message):
    logger.warning('No confirmation prompt configured; declining: %s', message)
    return False


class CollectionViewController:
    """Load, search, sort and mutate one admin collection.

    Args:
        resource: ResourceType describing the records.
        data_source: object providing fetch_all/update_published/delete.
        confirm: callable(message) -> bool asked before every delete.
        sort: initial SortSpec, defaults to the resource's default sort.
        search_term: initial search term.
    """

    def __init__(self, resource, data_source, confirm=None, sort=None, search_term=''):
        self.resource = resource
        self.data_source = data_source
        self.confirm = confirm or _decline
        self.sort = sort or SortSpec(*resource.default_sort)
        self.search_term = search_term or ''
        self.state = ViewState.IDLE
        self.records = []
        self.error = None
        self.history = []
        self._pending = {}

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self):
        """Fetch the collection into the working copy. Returns True on success."""
        if self.state in (ViewState.LOADING, ViewState.MUTATING):
            logger.debug('%s: load ignored while %s', self.resource.name, self.state.value)
            return False

        self.state = ViewState.LOADING
        try:
            fetched = self.data_source.fetch_all()
        except DataSourceError as e:
            logger.warning('Could not load %s: %s', self.resource.name, e)
            self.error = str(e)
            self.state = ViewState.ERROR
            return False

        self.records = [dict(record) for record in fetched]
        self.error = None
        self.state = ViewState.READY
        logger.debug('Loaded %d %s', len(self.records), self.resource.name)
        return True

    # ------------------------------------------------------------------
    # Derived view
    # ------------------------------------------------------------------

    def visible(self):
        filtered = filter_records(self.records, self.search_term, self.resource.searchable_fields)
        return sort_records(filtered, self.sort, self.resource.sort_types)

    def set_search_term(self, term):
        self.search_term = term or ''

    def next_sort(self, field):
        """The sort that clicking `field` would produce."""
        if field not in self.resource.sort_types:
            raise ValueError(f'{self.resource.name} cannot be sorted by {field!r}')
        if field == self.sort.field:
            return self.sort.flipped()
        return SortSpec(field, ASC)

    def set_sort(self, field):
        self.sort = self.next_sort(field)
        return self.sort

    def dismiss_error(self):
        self.error = None

    def find(self, record_id):
        for record in self.records:
            if record.get('id') == record_id:
                return record
        return None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def toggle_published(self, record_id):
        """Flip `published` locally, then confirm with the data source.

        The flip is reverted if the data source rejects it.
        """
        mutation = self._begin('toggle_published', record_id)
        if mutation.settled:
            return mutation

        index = self._index_of(record_id)
        original = self.records[index]
        new_value = not original.get('published', False)
        self.records[index] = dict(original, published=new_value)

        try:
            self.data_source.update_published(record_id, new_value)
        except DataSourceError as e:
            position = self._index_of(record_id)
            if position is not None:
                self.records[position] = original
            self._settle(mutation, e)
        else:
            self._settle(mutation)
        return mutation

    def remove(self, record_id):
        """Delete a record after confirmation.

        Returns None when the prompt is declined, otherwise the settled
        Mutation. The record leaves the working copy only once the data
        source has confirmed the delete.
        """
        record = self.find(record_id)
        if record is not None:
            label = self.resource.label.lower()
            if not self.confirm(f'Are you sure you want to delete this {label}?'):
                logger.debug('Delete of %s %s cancelled', self.resource.name, record_id)
                return None

        mutation = self._begin('remove', record_id)
        if mutation.settled:
            return mutation

        try:
            self.data_source.delete(record_id)
        except DataSourceError as e:
            self._settle(mutation, e)
        else:
            self.records = [r for r in self.records if r.get('id') != record_id]
            self._settle(mutation)
        return mutation

    def is_pending(self, record_id):
        return record_id in self._pending

    def _index_of(self, record_id):
        for index, record in enumerate(self.records):
            if record.get('id') == record_id:
                return index
        return None

    def _begin(self, kind, record_id):
        mutation = Mutation(kind, record_id)
        self.history.append(mutation)

        if record_id in self._pending:
            error = MutationInProgress(
                f'{self.resource.label} {record_id} is still being updated. Please wait.')
            mutation.reject(str(error))
            self.error = mutation.error
            return mutation

        if self.find(record_id) is None:
            mutation.reject(f'{self.resource.label} {record_id} not found')
            self.error = mutation.error
            return mutation

        self._pending[record_id] = mutation
        self.state = ViewState.MUTATING
        return mutation

    def _settle(self, mutation, error=None):
        if error is None:
            mutation.commit()
            logger.info('%s %s: %s committed', self.resource.label, mutation.record_id, mutation.kind)
        else:
            mutation.reject(str(error))
            self.error = mutation.error
            logger.warning('%s %s: %s rejected: %s',
                           self.resource.label, mutation.record_id, mutation.kind, error)

        self._pending.pop(mutation.record_id, None)
        if not self._pending:
            self.state = ViewState.READY
