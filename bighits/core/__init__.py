"""
Admin Core

Framework-free pieces shared by every admin list and form screen: the
access guard, the collection view controller, record forms and the data
source adapters they talk to.
"""

from bighits.core.errors import BigHitsError, ValidationError, DataSourceError, MutationInProgress
from bighits.core.slugs import slugify
from bighits.core.session import Session, SessionStatus, SessionUser
from bighits.core.guard import AccessGuard, Allow, RedirectTo
from bighits.core.navigation import RedirectRouter
from bighits.core.resources import RESOURCES, BLOGS, PRODUCTS, TUTORS, get_resource
from bighits.core.collection import (
    ASC, DESC, CollectionViewController, Mutation, MutationStatus, SortSpec, ViewState,
    filter_records, sort_records,
)
from bighits.core.forms import RecordForm, clean_draft
from bighits.core.datasource import InMemoryDataSource, SQLAlchemyDataSource

__all__ = [
    'BigHitsError', 'ValidationError', 'DataSourceError', 'MutationInProgress',
    'slugify',
    'Session', 'SessionStatus', 'SessionUser',
    'AccessGuard', 'Allow', 'RedirectTo',
    'RedirectRouter',
    'RESOURCES', 'BLOGS', 'PRODUCTS', 'TUTORS', 'get_resource',
    'ASC', 'DESC', 'CollectionViewController', 'Mutation', 'MutationStatus', 'SortSpec',
    'ViewState', 'filter_records', 'sort_records',
    'RecordForm', 'clean_draft',
    'InMemoryDataSource', 'SQLAlchemyDataSource',
]
