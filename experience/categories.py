"""
Category registry

Closed sets of industries, project types and tools, each with a stable
display color token. The declaration order of each enumeration is the
order used everywhere metrics are presented.
"""
import logging
from types import MappingProxyType
from typing import Iterable, List, Optional

from django.db import models

logger = logging.getLogger(__name__)


class Industry(models.TextChoices):
    TECHNOLOGY = 'Technology', 'Technology'
    HEALTHCARE = 'Healthcare', 'Healthcare'
    FINANCIAL_SERVICES = 'Financial Services', 'Financial Services'
    MANUFACTURING = 'Manufacturing', 'Manufacturing'
    RETAIL = 'Retail', 'Retail'
    ENERGY = 'Energy', 'Energy'
    EDUCATION = 'Education', 'Education'
    TELECOMMUNICATIONS = 'Telecommunications', 'Telecommunications'
    OTHER = 'Other', 'Other'


class ProjectType(models.TextChoices):
    ALIGN_AND_ACTIVATE = 'Align and activate', 'Align and activate'
    RIGHT_SIZING = 'Right-sizing', 'Right-sizing'
    PMI = 'PMI', 'PMI'
    ORG_DD = 'Org DD', 'Org DD'
    TOM_IMPLEMENTATION = 'TOM implementation', 'TOM implementation'
    OTHER = 'Other', 'Other'


class Tool(models.TextChoices):
    ALTUS = 'altus', 'Altus'
    MODAS = 'modas', 'Modas'
    NONE = 'none', 'None'


INDUSTRY_COLORS = MappingProxyType({
    Industry.TECHNOLOGY: 'bg-blue-500',
    Industry.HEALTHCARE: 'bg-green-500',
    Industry.FINANCIAL_SERVICES: 'bg-purple-500',
    Industry.MANUFACTURING: 'bg-orange-500',
    Industry.RETAIL: 'bg-pink-500',
    Industry.ENERGY: 'bg-yellow-500',
    Industry.EDUCATION: 'bg-teal-500',
    Industry.TELECOMMUNICATIONS: 'bg-indigo-500',
    Industry.OTHER: 'bg-gray-500',
})

PROJECT_TYPE_COLORS = MappingProxyType({
    ProjectType.ALIGN_AND_ACTIVATE: 'bg-emerald-500',
    ProjectType.RIGHT_SIZING: 'bg-amber-500',
    ProjectType.PMI: 'bg-sky-500',
    ProjectType.ORG_DD: 'bg-fuchsia-500',
    ProjectType.TOM_IMPLEMENTATION: 'bg-rose-500',
    ProjectType.OTHER: 'bg-gray-500',
})

TOOL_COLORS = MappingProxyType({
    Tool.ALTUS: 'bg-blue-600',
    Tool.MODAS: 'bg-purple-600',
    Tool.NONE: 'bg-gray-400',
})

DEFAULT_INDUSTRY_COLOR = 'bg-gray-500'
DEFAULT_PROJECT_TYPE_COLOR = 'bg-gray-500'
DEFAULT_TOOL_COLOR = 'bg-gray-400'


def industry_color(value) -> str:
    """Color token for an industry; unknown values get the fallback color."""
    return INDUSTRY_COLORS.get(value, DEFAULT_INDUSTRY_COLOR)


def project_type_color(value) -> str:
    """Color token for a project type; unknown values get the fallback color."""
    return PROJECT_TYPE_COLORS.get(value, DEFAULT_PROJECT_TYPE_COLOR)


def tool_color(value) -> str:
    """Color token for a tool; unknown values get the fallback color."""
    return TOOL_COLORS.get(value, DEFAULT_TOOL_COLOR)


def _parse(enum_cls, raw, fallback):
    if isinstance(raw, enum_cls):
        return raw
    text = (raw or '').strip() if isinstance(raw, str) else ''
    if text in enum_cls.values:
        return enum_cls(text)
    # Case-insensitive match on value or label before falling back.
    lowered = text.lower()
    for member in enum_cls:
        if lowered and lowered in (member.value.lower(), str(member.label).lower()):
            return member
    logger.debug("Unknown %s value %r; using %s", enum_cls.__name__, raw, fallback.value)
    return fallback


def parse_industry(raw) -> Industry:
    """Parse untrusted input into an Industry, defaulting to Other."""
    return _parse(Industry, raw, Industry.OTHER)


def parse_project_type(raw) -> ProjectType:
    """Parse untrusted input into a ProjectType, defaulting to Other."""
    return _parse(ProjectType, raw, ProjectType.OTHER)


def parse_tool(raw) -> Tool:
    """Parse untrusted input into a Tool, defaulting to the none sentinel."""
    return _parse(Tool, raw, Tool.NONE)


def normalize_tools(raw_tools: Optional[Iterable]) -> List[Tool]:
    """
    Parse a tool tag list, keeping every tag in order.

    An empty list becomes ``[Tool.NONE]`` so every project lands in at
    least one tool bucket. Tags are otherwise counted as given, the none
    sentinel and repeats included.
    """
    tools = [parse_tool(raw) for raw in raw_tools or []]
    return tools or [Tool.NONE]
