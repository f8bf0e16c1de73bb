"""
Cycle protection for the category hierarchy.

``would_create_cycle`` is the gate every reparenting must pass.
"""
from collections import defaultdict, deque
from typing import Dict, Iterable, List, Optional, Set
from uuid import UUID

from catalog_core.schemas.category import CategoryRecord


def _children_index(categories: Iterable[CategoryRecord]) -> Dict[UUID, List[UUID]]:
    index: Dict[UUID, List[UUID]] = defaultdict(list)
    for category in categories:
        if category.parent_id is not None:
            index[category.parent_id].append(category.id)
    return index


def descendant_ids(category_id: UUID, categories: Iterable[CategoryRecord]) -> Set[UUID]:
    """
    IDs of every category below ``category_id``.

    Already-seen IDs are not expanded again, so a cycle in corrupted data
    terminates instead of looping forever.
    """
    children = _children_index(categories)
    found: Set[UUID] = set()
    queue = deque(children.get(category_id, []))
    while queue:
        current = queue.popleft()
        if current in found:
            continue
        found.add(current)
        queue.extend(children.get(current, []))
    return found


def would_create_cycle(
    category_id: UUID,
    candidate_parent_id: Optional[UUID],
    categories: Iterable[CategoryRecord],
) -> bool:
    """True if making ``candidate_parent_id`` the parent of ``category_id`` closes a loop"""
    if candidate_parent_id is None:
        return False
    if candidate_parent_id == category_id:
        return True
    return candidate_parent_id in descendant_ids(category_id, categories)
