"""
Record Forms

State behind the new/edit pages: field values, the derived slug, a single
form-level error message and the submit flow.
"""

import logging
import math

from bighits.core.errors import DataSourceError, ValidationError
from bighits.core.slugs import is_valid_slug, slugify

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = 'Please fill in all required fields'


def _is_blank(value):
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _parse_number(value):
    if isinstance(value, bool):
        raise ValueError('not a number')
    number = float(value.strip() if isinstance(value, str) else value)
    if not math.isfinite(number):
        raise ValueError('not a finite number')
    return number


def clean_draft(resource, fields):
    """Validate form `fields` and return a typed draft ready to save.

    Raises ValidationError with one message for the whole form.
    """
    for name in resource.required_fields:
        if _is_blank(fields.get(name)):
            raise ValidationError(REQUIRED_MESSAGE)

    draft = {}
    for form_field in resource.form_fields:
        value = fields.get(form_field.name)
        if form_field.kind == 'checkbox':
            draft[form_field.name] = bool(value)
        elif isinstance(value, str):
            draft[form_field.name] = value.strip()
        else:
            draft[form_field.name] = value

    for rule in resource.numeric_rules:
        raw = draft.get(rule.field)
        if _is_blank(raw):
            if rule.optional:
                draft[rule.field] = None
                continue
            raise ValidationError(REQUIRED_MESSAGE)
        try:
            number = _parse_number(raw)
        except (TypeError, ValueError):
            raise ValidationError(rule.message)
        if not rule.accepts(number):
            raise ValidationError(rule.message)
        draft[rule.field] = int(number) if rule.integer else number

    for check in resource.checks:
        message = check(draft)
        if message:
            raise ValidationError(message)

    slug = draft.get('slug') or slugify(draft.get(resource.title_field))
    if not is_valid_slug(slug):
        raise ValidationError('Slug may only contain lowercase letters, numbers and hyphens')
    draft['slug'] = slug

    return draft


class RecordForm:
    """Create or edit one record of `resource`.

    Args:
        resource: ResourceType of the record.
        data_source: object providing fetch_by_id/save.
        router: object with push(path), used after a successful save.
        record_id: id of the record to edit; None for a new record.
    """

    def __init__(self, resource, data_source, router, record_id=None):
        self.resource = resource
        self.data_source = data_source
        self.router = router
        self.record_id = record_id
        self.fields = resource.blank_draft()
        self.error = None
        self.is_loading = False
        self.is_submitting = False
        self.loaded = record_id is None

    @property
    def is_new(self):
        return self.record_id is None

    def load(self):
        """Fill the form from the stored record (edit only)."""
        if self.is_new:
            return True
        self.is_loading = True
        try:
            record = self.data_source.fetch_by_id(self.record_id)
        except DataSourceError as e:
            logger.warning('Failed to load %s %s: %s', self.resource.name, self.record_id, e)
            self.error = f'Failed to load {self.resource.label.lower()}: {e}'
            return False
        finally:
            self.is_loading = False

        for name in self.fields:
            value = record.get(name)
            if isinstance(self.fields[name], bool):
                self.fields[name] = bool(value)
            else:
                self.fields[name] = '' if value is None else value
        self.loaded = True
        return True

    def set_field(self, name, value):
        """Set one field; a title change recomputes the slug."""
        self.fields[name] = value
        if name == self.resource.title_field:
            self.fields['slug'] = slugify(value)

    def update_fields(self, data):
        """Apply a submitted mapping (e.g. request.form) to the fields.

        A changed title wins over a slug submitted alongside it.
        """
        title_field = self.resource.title_field
        previous_title = self.fields.get(title_field)

        for form_field in self.resource.form_fields:
            name = form_field.name
            if name in ('slug', title_field):
                continue
            if form_field.kind == 'checkbox':
                self.fields[name] = name in data and data.get(name) not in ('', '0', 'false', 'off')
            elif name in data:
                self.fields[name] = data.get(name)

        new_title = data.get(title_field, previous_title)
        if new_title != previous_title:
            self.set_field(title_field, new_title)
        elif 'slug' in data:
            self.fields['slug'] = data.get('slug')

    def validate(self):
        return clean_draft(self.resource, self.fields)

    def submit(self):
        """Validate and save. Returns the saved record, or None on failure."""
        if self.is_submitting:
            self.error = 'This form is already being submitted.'
            return None
        if not self.loaded:
            self.error = self.error or f'{self.resource.label} could not be loaded.'
            return None

        self.is_submitting = True
        self.error = None
        try:
            draft = self.validate()
            if not self.is_new:
                draft['id'] = self.record_id
            saved = self.data_source.save(draft)
        except (ValidationError, DataSourceError) as e:
            self.error = str(e)
            return None
        finally:
            self.is_submitting = False

        logger.info('Saved %s %s', self.resource.label, saved.get('id'))
        self.router.push(self.resource.list_path)
        return saved
