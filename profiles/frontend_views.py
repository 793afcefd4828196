"""
Frontend views for profiles app.
Consultant profile pages and profile editing.
"""
from datetime import datetime

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render

from experience.services import ExperienceSummaryService
from projects.models import Project
from .models import ConsultantProfile


def _records(profile):
    return [project.to_record() for project in profile.projects.all()]


@login_required
def profile_detail(request, profile_id):
    """Display a consultant's experience profile."""
    profile = get_object_or_404(
        ConsultantProfile.objects.select_related('user'),
        id=profile_id,
    )
    summary = ExperienceSummaryService.build_summary(
        _records(profile),
        start_date=profile.start_date,
    )
    context = {
        'profile': profile,
        'summary': summary,
        'is_own_profile': profile.user_id == request.user.id,
    }
    return render(request, 'profiles/detail.html', context)


@login_required
def profile_view(request):
    """Redirect to the current user's profile page."""
    try:
        profile = ConsultantProfile.objects.get(user=request.user)
    except ConsultantProfile.DoesNotExist:
        messages.info(request, 'Set up your profile to appear on the team page.')
        return redirect('profile_edit')
    return redirect('profile_detail', profile_id=profile.id)


@login_required
def profile_edit(request):
    """Edit the current user's profile and project membership."""
    profile, _ = ConsultantProfile.objects.get_or_create(
        user=request.user,
        defaults={'display_name': request.user.get_full_name()},
    )

    if request.method == 'POST':
        profile.display_name = request.POST.get('display_name', '').strip()
        profile.job_title = request.POST.get('job_title', '').strip()
        profile.location = request.POST.get('location', '').strip()
        profile.bio = request.POST.get('bio', '').strip()

        start_date = (request.POST.get('start_date') or '').strip()
        if start_date:
            try:
                profile.start_date = datetime.strptime(start_date, '%Y-%m-%d').date()
            except ValueError:
                messages.error(request, 'start_date must be in YYYY-MM-DD format')
                return redirect('profile_edit')
        else:
            profile.start_date = None

        profile.save()

        project_ids = request.POST.getlist('projects')
        profile.projects.set(Project.objects.filter(id__in=project_ids))

        messages.success(request, 'Profile updated successfully.')
        return redirect('profile_detail', profile_id=profile.id)

    context = {
        'profile': profile,
        'all_projects': Project.objects.order_by('name'),
        'selected_ids': set(profile.projects.values_list('id', flat=True)),
    }
    return render(request, 'profiles/edit.html', context)


@login_required
def profile_project_toggle(request, project_id):
    """Add or remove a single project on the current user's profile."""
    if request.method != 'POST':
        return redirect('profile_edit')

    profile, _ = ConsultantProfile.objects.get_or_create(user=request.user)
    project = get_object_or_404(Project, id=project_id)

    if profile.projects.filter(id=project.id).exists():
        profile.projects.remove(project)
        messages.success(request, f'Project "{project.name}" removed from your profile.')
    else:
        profile.projects.add(project)
        messages.success(request, f'Project "{project.name}" added to your profile.')
    return redirect('profile_edit')
