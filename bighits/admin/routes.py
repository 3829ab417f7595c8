"""
Admin Routes

Every list, toggle, delete and form view is served by the generic
collection controller and record form, parametrized by the resource named
in the URL.
"""

from flask import abort, current_app, flash, redirect, render_template, request, url_for

from bighits.admin import admin_bp
from bighits.admin.decorators import admin_required
from bighits.core import (
    ASC, DESC, RESOURCES, CollectionViewController, MutationStatus, RecordForm,
    RedirectRouter, SortSpec, get_resource,
)


def _resource_or_404(resource_name):
    resource = get_resource(resource_name)
    if resource is None:
        abort(404)
    return resource


def _data_source(resource):
    return current_app.extensions['data_sources'][resource.name]


def _list_state(source):
    """Search and sort carried in query args or hidden form fields."""
    state = {}
    for key in ('q', 'sort', 'dir'):
        value = source.get(key)
        if value:
            state[key] = value
    return state


def _controller(resource, source, confirm=None):
    sort = None
    field = source.get('sort')
    if field in resource.sort_types:
        direction = source.get('dir')
        sort = SortSpec(field, direction if direction in (ASC, DESC) else ASC)
    return CollectionViewController(
        resource,
        _data_source(resource),
        confirm=confirm,
        sort=sort,
        search_term=source.get('q', ''),
    )


def _back_to_list(resource, source):
    return redirect(url_for('admin.list_records', resource_name=resource.name, **_list_state(source)))


@admin_bp.route('/')
@admin_required
def dashboard():
    """Admin dashboard with per-collection totals."""
    totals = []
    for resource in RESOURCES.values():
        controller = CollectionViewController(resource, _data_source(resource))
        if controller.load():
            published = sum(1 for r in controller.records if r.get('published'))
            totals.append((resource, len(controller.records), published))
        else:
            flash(controller.error, 'danger')
            totals.append((resource, None, None))
    return render_template('admin/dashboard.html', totals=totals)


@admin_bp.route('/<resource_name>')
@admin_required
def list_records(resource_name):
    """Searchable, sortable list of one collection."""
    resource = _resource_or_404(resource_name)
    controller = _controller(resource, request.args)
    controller.load()
    if controller.error:
        flash(controller.error, 'danger')

    search = controller.search_term
    sort_links = {}
    for field, _label in resource.columns:
        if field in resource.sort_types:
            spec = controller.next_sort(field)
            params = {'sort': spec.field, 'dir': spec.direction}
            if search:
                params['q'] = search
            sort_links[field] = url_for('admin.list_records', resource_name=resource.name, **params)

    return render_template(
        'admin/list.html',
        resource=resource,
        controller=controller,
        records=controller.visible(),
        sort_links=sort_links,
        list_state=_list_state(request.args),
    )


@admin_bp.route('/<resource_name>/<int:record_id>/toggle', methods=['POST'])
@admin_required
def toggle_published(resource_name, record_id):
    """Publish or unpublish a record."""
    resource = _resource_or_404(resource_name)
    controller = _controller(resource, request.form)
    if not controller.load():
        flash(controller.error, 'danger')
        return _back_to_list(resource, request.form)

    mutation = controller.toggle_published(record_id)
    if mutation.status is MutationStatus.REJECTED:
        flash(mutation.error, 'danger')
    else:
        record = controller.find(record_id)
        state = 'published' if record['published'] else 'unpublished'
        flash(f'{resource.label} {state}.', 'success')
    return _back_to_list(resource, request.form)


@admin_bp.route('/<resource_name>/<int:record_id>/delete', methods=['GET', 'POST'])
@admin_required
def delete_record(resource_name, record_id):
    """Confirmation page (GET) and delete (POST with confirm=yes)."""
    resource = _resource_or_404(resource_name)
    source = request.form if request.method == 'POST' else request.args

    def confirmed(message):
        return request.method == 'POST' and request.form.get('confirm') == 'yes'

    controller = _controller(resource, source, confirm=confirmed)
    if not controller.load():
        flash(controller.error, 'danger')
        return _back_to_list(resource, source)

    record = controller.find(record_id)
    if record is None:
        abort(404)

    if request.method == 'GET':
        return render_template(
            'admin/confirm_delete.html',
            resource=resource,
            record=record,
            message=f'Are you sure you want to delete this {resource.label.lower()}?',
            list_state=_list_state(source),
        )

    title = record.get(resource.title_field)
    mutation = controller.remove(record_id)
    if mutation is None:
        flash('Deletion cancelled.', 'info')
    elif mutation.status is MutationStatus.REJECTED:
        flash(mutation.error, 'danger')
    else:
        flash(f'{resource.label} "{title}" deleted.', 'success')
    return _back_to_list(resource, source)


@admin_bp.route('/<resource_name>/new', methods=['GET', 'POST'])
@admin_required
def new_record(resource_name):
    """Create a record."""
    resource = _resource_or_404(resource_name)
    router = RedirectRouter()
    form = RecordForm(resource, _data_source(resource), router)

    if request.method == 'POST':
        form.update_fields(request.form)
        saved = form.submit()
        if saved is not None:
            flash(f'{resource.label} "{saved.get(resource.title_field)}" created.', 'success')
            return redirect(router.location)

    return render_template('admin/form.html', resource=resource, form=form)


@admin_bp.route('/<resource_name>/edit/<int:record_id>', methods=['GET', 'POST'])
@admin_required
def edit_record(resource_name, record_id):
    """Edit a record."""
    resource = _resource_or_404(resource_name)
    router = RedirectRouter()
    form = RecordForm(resource, _data_source(resource), router, record_id=record_id)

    if not form.load():
        return render_template('admin/form.html', resource=resource, form=form), 404

    if request.method == 'POST':
        form.update_fields(request.form)
        saved = form.submit()
        if saved is not None:
            flash(f'{resource.label} "{saved.get(resource.title_field)}" updated.', 'success')
            return redirect(router.location)

    return render_template('admin/form.html', resource=resource, form=form)
