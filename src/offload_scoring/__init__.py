"""Pluggable scoring of candidate execution targets for task offloading."""

from .core.container import DIContainer
from .core.scorer import Scorer
from .domain.models import QueryResult

__all__ = [
    "Scorer",
    "DIContainer",
    "QueryResult",
    "domain",
    "scoring",
    "core",
    "resources",
    "analytics",
]
