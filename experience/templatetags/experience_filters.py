"""
Custom template filters for experience badges and category colors.
"""
from django import template
from django.utils.formats import date_format

from experience import categories
from experience.badges import experience_level as level_for_count

register = template.Library()


@register.filter(name='industry_color')
def industry_color(value):
    return categories.industry_color(value)


@register.filter(name='project_type_color')
def project_type_color(value):
    return categories.project_type_color(value)


@register.filter(name='tool_color')
def tool_color(value):
    return categories.tool_color(value)


@register.filter(name='experience_level')
def experience_level(value):
    """
    Experience level label for a project count.
    Example: 12 -> Advanced
    """
    try:
        return level_for_count(int(value)).label
    except (ValueError, TypeError):
        return ''


@register.filter(name='month_span')
def month_span(project):
    """
    Format a project's date range as "Jan 2022 - Apr 2022".
    """
    try:
        start = date_format(project.start_date, 'M Y')
        end = date_format(project.end_date, 'M Y')
    except AttributeError:
        return ''
    return f"{start} - {end}"
