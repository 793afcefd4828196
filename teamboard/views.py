"""
Main project views for frontend pages.
"""
from django.shortcuts import render, redirect
from django.contrib.auth.decorators import login_required
from django.contrib.auth import authenticate, login as auth_login, logout as auth_logout
from django.contrib import messages
from django.db.models import Prefetch
from django.utils.http import url_has_allowed_host_and_scheme

from experience.services import ExperienceSummaryService
from profiles.models import ConsultantProfile
from projects.models import Project


def about_view(request):
    """About page view."""
    return render(request, 'about.html')


def login_view(request):
    """Handle user login."""
    if request.user.is_authenticated:
        return redirect('dashboard')

    if request.method == 'POST':
        username = request.POST.get('username')
        password = request.POST.get('password')
        user = authenticate(request, username=username, password=password)

        if user is not None:
            auth_login(request, user)
            next_url = request.POST.get('next')
            if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
                return redirect(next_url)
            return redirect('dashboard')
        else:
            messages.error(request, 'Invalid username or password.')

    return render(request, 'login.html', {'next': request.GET.get('next', '')})


def logout_view(request):
    """Handle user logout."""
    auth_logout(request)
    messages.success(request, 'Successfully logged out.')
    return redirect('login')


@login_required
def dashboard(request):
    """Team overview: one card per consultant with their headline metrics."""
    profiles = ConsultantProfile.objects.select_related('user').prefetch_related(
        Prefetch('projects', queryset=Project.objects.order_by('name'))
    )

    cards = []
    for profile in profiles:
        records = [project.to_record() for project in profile.projects.all()]
        cards.append({
            'profile': profile,
            **ExperienceSummaryService.build_card(records),
        })

    context = {
        'cards': cards,
        'member_count': len(cards),
        'project_count': Project.objects.count(),
        'own_profile': profiles.filter(user=request.user).first(),
    }

    return render(request, 'dashboard.html', context)
