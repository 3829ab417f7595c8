"""
Resource Definitions

One ResourceType per admin collection (blogs, products, tutors). It declares
everything the generic controller and forms need to know about a record
type: which fields are searched, how each sortable field compares, which
form fields are required and which numeric rules apply.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

NUMBER = 'number'
STRING = 'string'


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    kind: str = 'text'  # text, textarea, number, checkbox, select
    choices: Tuple[str, ...] = ()


@dataclass(frozen=True)
class NumericRule:
    """Constraint on a numeric form field.

    Exactly one of `minimum` (inclusive) or `greater_than` is set.
    """
    field: str
    message: str
    minimum: Optional[float] = None
    greater_than: Optional[float] = None
    integer: bool = False
    optional: bool = False

    def accepts(self, value):
        if self.greater_than is not None and not value > self.greater_than:
            return False
        if self.minimum is not None and not value >= self.minimum:
            return False
        return True


@dataclass(frozen=True)
class ResourceType:
    name: str
    label: str
    title_field: str
    searchable_fields: Tuple[str, ...]
    sort_types: Dict[str, str]
    default_sort: Tuple[str, str]
    required_fields: Tuple[str, ...]
    form_fields: Tuple[FormField, ...]
    columns: Tuple[Tuple[str, str], ...]
    numeric_rules: Tuple[NumericRule, ...] = ()
    checks: Tuple[Callable[[dict], Optional[str]], ...] = field(default=())

    @property
    def list_path(self):
        return f'/admin/{self.name}'

    @property
    def numeric_fields(self):
        return tuple(f for f, kind in self.sort_types.items() if kind == NUMBER)

    def blank_draft(self):
        draft = {}
        for form_field in self.form_fields:
            draft[form_field.name] = False if form_field.kind == 'checkbox' else ''
        return draft


def _calendly_link(draft):
    link = (draft.get('calendly_link') or '').strip()
    if link and 'calendly.com' not in link:
        return 'Please enter a valid Calendly link'
    return None


BLOG_CATEGORIES = ('Business', 'Marketing', 'E-commerce', 'SEO', 'Personal Development')
PRODUCT_CATEGORIES = (
    'Design Services', 'Digital Marketing', 'Web Templates', 'E-books', 'Courses', 'Software',
)

BLOGS = ResourceType(
    name='blogs',
    label='Blog Post',
    title_field='title',
    searchable_fields=('title', 'category', 'author'),
    sort_types={
        'title': STRING, 'author': STRING, 'category': STRING,
        'date': STRING, 'published': STRING,
    },
    default_sort=('date', 'desc'),
    required_fields=('title', 'content', 'excerpt', 'category'),
    form_fields=(
        FormField('title', 'Title'),
        FormField('slug', 'Slug'),
        FormField('excerpt', 'Excerpt', 'textarea'),
        FormField('content', 'Content', 'textarea'),
        FormField('cover_image', 'Cover Image URL'),
        FormField('category', 'Category', 'select', BLOG_CATEGORIES),
        FormField('tags', 'Tags (comma separated)'),
        FormField('published', 'Published', 'checkbox'),
    ),
    columns=(
        ('title', 'Title'), ('author', 'Author'), ('category', 'Category'),
        ('date', 'Date'), ('published', 'Status'),
    ),
)

PRODUCTS = ResourceType(
    name='products',
    label='Product',
    title_field='name',
    searchable_fields=('name', 'category', 'price', 'stock'),
    sort_types={
        'name': STRING, 'category': STRING, 'price': NUMBER,
        'stock': NUMBER, 'published': STRING,
    },
    default_sort=('name', 'asc'),
    required_fields=('name', 'description', 'price', 'category', 'stock'),
    form_fields=(
        FormField('name', 'Product Name'),
        FormField('slug', 'Slug'),
        FormField('description', 'Description', 'textarea'),
        FormField('price', 'Price ($)', 'number'),
        FormField('sale_price', 'Sale Price ($)', 'number'),
        FormField('category', 'Category', 'select', PRODUCT_CATEGORIES),
        FormField('stock', 'Stock', 'number'),
        FormField('sku', 'SKU'),
        FormField('images', 'Image URLs (comma separated)'),
        FormField('published', 'Published', 'checkbox'),
        FormField('featured', 'Featured', 'checkbox'),
    ),
    columns=(
        ('name', 'Product'), ('price', 'Price'), ('category', 'Category'),
        ('stock', 'Stock'), ('published', 'Status'),
    ),
    numeric_rules=(
        NumericRule('price', 'Price must be a positive number', greater_than=0),
        NumericRule('sale_price', 'Sale price must be a positive number',
                    greater_than=0, optional=True),
        NumericRule('stock', 'Stock must be a non-negative number', minimum=0, integer=True),
    ),
)

TUTORS = ResourceType(
    name='tutors',
    label='Tutor',
    title_field='name',
    searchable_fields=('name', 'expertise', 'rate', 'availability'),
    sort_types={
        'name': STRING, 'expertise': STRING, 'rate': NUMBER,
        'rating': NUMBER, 'published': STRING,
    },
    default_sort=('name', 'asc'),
    required_fields=('name', 'bio', 'expertise', 'rate'),
    form_fields=(
        FormField('name', 'Full Name'),
        FormField('slug', 'Slug'),
        FormField('bio', 'Bio', 'textarea'),
        FormField('expertise', 'Expertise'),
        FormField('rate', 'Hourly Rate ($)', 'number'),
        FormField('calendly_link', 'Calendly Link'),
        FormField('availability', 'Availability'),
        FormField('profile_image', 'Profile Image URL'),
        FormField('published', 'Published', 'checkbox'),
        FormField('featured', 'Featured', 'checkbox'),
    ),
    columns=(
        ('name', 'Tutor'), ('expertise', 'Expertise'), ('rate', 'Rate'),
        ('rating', 'Rating'), ('published', 'Status'),
    ),
    numeric_rules=(
        NumericRule('rate', 'Rate must be a positive number', greater_than=0),
    ),
    checks=(_calendly_link,),
)

RESOURCES = {r.name: r for r in (BLOGS, PRODUCTS, TUTORS)}


def get_resource(name):
    """Return the ResourceType registered under `name`, or None."""
    return RESOURCES.get(name)
