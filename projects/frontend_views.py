"""
Frontend views for project management.
Renders the project database with filters, forms and Harvest sync.
"""
import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.shortcuts import get_object_or_404, redirect, render

from experience.categories import Industry, ProjectType, Tool
from experience.filters import FilterSpec, filter_options, matches
from harvest.services import HarvestSyncService
from harvest.tasks import queue_harvest_sync
from .models import Project
from .services import ProjectService

logger = logging.getLogger(__name__)


def _form_data(request):
    return {
        'name': request.POST.get('name', ''),
        'description': request.POST.get('description', ''),
        'start_date': request.POST.get('start_date', ''),
        'end_date': request.POST.get('end_date', ''),
        'industry': request.POST.get('industry', ''),
        'project_type': request.POST.get('project_type', ''),
        'tools': [t for t in request.POST.getlist('tools') if t],
    }


def _can_sync(user):
    return getattr(user, 'is_staff', False) or getattr(user, 'is_admin_role', False)


def _form_context(**extra):
    context = {
        'industries': Industry.choices,
        'project_types': ProjectType.choices,
        'tools': [choice for choice in Tool.choices if choice[0] != Tool.NONE],
    }
    context.update(extra)
    return context


@login_required
def project_list(request):
    """Project database with search and category filters."""
    projects = list(Project.objects.all())
    spec = FilterSpec.from_query_params(request.GET)
    records = {project.id: project.to_record() for project in projects}

    filtered = [project for project in projects if matches(records[project.id], spec)]

    return render(request, 'projects/list.html', {
        'projects': filtered,
        'total_count': len(projects),
        'filters': spec,
        'options': filter_options(records.values()),
        'can_sync': _can_sync(request.user),
    })


@login_required
def project_add(request):
    """Add a new project."""
    if request.method == 'POST':
        data = _form_data(request)
        try:
            project = ProjectService.create_project(data)
            messages.success(request, f'Project "{project.name}" added successfully!')
            return redirect('project_list')
        except ValidationError as e:
            for error in e.messages:
                messages.error(request, error)
            return render(request, 'projects/form.html', _form_context(
                form_data=data,
                is_edit=False,
            ))

    return render(request, 'projects/form.html', _form_context(is_edit=False))


@login_required
def project_edit(request, project_id):
    """Edit an existing project."""
    project = get_object_or_404(Project, id=project_id)

    if request.method == 'POST':
        data = _form_data(request)
        try:
            ProjectService.update_project(project_id, data)
            messages.success(request, 'Project updated successfully!')
            return redirect('project_list')
        except ValidationError as e:
            for error in e.messages:
                messages.error(request, error)
            return render(request, 'projects/form.html', _form_context(
                form_data=data,
                project=project,
                is_edit=True,
            ))

    form_data = {
        'name': project.name,
        'description': project.description,
        'start_date': project.start_date.isoformat(),
        'end_date': project.end_date.isoformat(),
        'industry': project.industry,
        'project_type': project.project_type,
        'tools': project.tools,
    }
    return render(request, 'projects/form.html', _form_context(
        form_data=form_data,
        project=project,
        is_edit=True,
    ))


@login_required
def project_delete(request, project_id):
    """Delete a project."""
    project = get_object_or_404(Project, id=project_id)

    if request.method == 'POST':
        name = project.name
        ProjectService.delete_project(project_id)
        messages.success(request, f'Project "{name}" deleted successfully.')
        return redirect('project_list')

    return render(request, 'projects/delete.html', {'project': project})


@login_required
def project_sync(request):
    """Sync projects with Harvest, queued or inline depending on settings."""
    if request.method != 'POST':
        return redirect('project_list')
    if not _can_sync(request.user):
        messages.error(request, 'Only admins can sync projects with Harvest.')
        return redirect('project_list')

    if not getattr(settings, 'HARVEST_SYNC_ASYNC', True):
        result = HarvestSyncService().sync_projects()
        if result.success:
            messages.success(request, result.message)
        else:
            messages.error(request, result.message)
        for error in result.errors:
            messages.warning(request, error)
        return redirect('project_list')

    try:
        queue_harvest_sync()
    except Exception as e:  # noqa: BLE001
        logger.error("Failed to queue Harvest sync: %s", e)
        messages.error(request, f"Failed to sync projects: {e}")
        return redirect('project_list')

    messages.info(request, 'Harvest sync started. Refresh in a moment to see updates.')
    return redirect('project_list')
