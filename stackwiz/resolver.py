"""
Stackwiz Resolver - Map user selections to ordered directives
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from stackwiz.catalog import Catalog, Category

logger = logging.getLogger(__name__)


def resolve(category: Category, selected_labels: Iterable[str]) -> list[str]:
    """
    Resolve selected labels to directives.

    Directives come back in catalog order, regardless of selection order.
    Duplicate labels collapse, blank directives are dropped and labels the
    category does not know are ignored.

    Args:
        category: Category to resolve against
        selected_labels: Labels picked by the user

    Returns:
        Ordered list of non-blank directives
    """
    selected = set(selected_labels)

    unknown = selected.difference(category.labels())
    if unknown:
        logger.debug("Ignoring unknown labels for %s: %s", category.name, sorted(unknown))

    return [
        choice.directive
        for choice in category.choices
        if choice.label in selected and not choice.is_blank
    ]


def resolve_all(catalog: Catalog, selections: Mapping[str, Iterable[str]]) -> list[str]:
    """Resolve every category of ``catalog`` in catalog order and concatenate the results."""
    directives: list[str] = []
    for category in catalog.categories:
        labels = selections.get(category.name)
        if labels:
            directives.extend(resolve(category, labels))
    return directives
