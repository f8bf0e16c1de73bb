"""
Category tree building.

Pure transformations over a flat snapshot of categories; no validation.
"""
from typing import Dict, Iterable, List, Optional
from uuid import UUID

from catalog_core.schemas.category import CategoryNode, CategoryRecord


def build_tree(categories: Iterable[CategoryRecord]) -> List[CategoryNode]:
    """
    Convert a flat list into root nodes with nested ``children``.

    A category whose parent is missing from the snapshot (dangling
    reference) is returned as a root so it stays visible.
    """
    categories = list(categories)
    nodes: Dict[UUID, CategoryNode] = {
        category.id: CategoryNode(**category.model_dump(exclude={"children"}), children=[])
        for category in categories
    }

    roots: List[CategoryNode] = []
    for category in categories:
        node = nodes[category.id]
        parent = nodes.get(category.parent_id) if category.parent_id else None
        if parent is not None:
            parent.children.append(node)
        else:
            roots.append(node)
    return roots


def flatten_tree(roots: Iterable[CategoryNode]) -> List[CategoryRecord]:
    """Pre-order walk: every parent precedes its children"""
    result: List[CategoryRecord] = []
    stack = list(reversed(list(roots)))
    while stack:
        node = stack.pop()
        result.append(node.to_record())
        stack.extend(reversed(node.children))
    return result


def _ancestry(category_id: UUID, categories: Iterable[CategoryRecord]) -> List[CategoryRecord]:
    by_id = {category.id: category for category in categories}
    chain: List[CategoryRecord] = []
    seen = set()
    current: Optional[UUID] = category_id
    while current is not None and current in by_id and current not in seen:
        seen.add(current)
        category = by_id[current]
        chain.append(category)
        current = category.parent_id
    return chain


def path_to(category_id: UUID, categories: Iterable[CategoryRecord]) -> List[CategoryRecord]:
    """Breadcrumb from the root down to ``category_id`` inclusive"""
    return list(reversed(_ancestry(category_id, categories)))


def level_of(category_id: UUID, categories: Iterable[CategoryRecord]) -> int:
    """Depth of a category: 0 for a root, 1 for its children, ..."""
    return max(len(_ancestry(category_id, categories)) - 1, 0)


def sort_categories(categories: Iterable[CategoryRecord]) -> List[CategoryRecord]:
    return sorted(categories, key=lambda category: category.name.casefold())
