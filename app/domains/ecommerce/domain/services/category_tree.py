"""
Category Tree Domain Service

Navigation over the self-referencing category hierarchy. The tree is built
once from a flat list of categories and answers children, descendant,
ancestor and path queries without further database round trips.
"""

from collections import defaultdict
from collections.abc import Iterable
from typing import Any, Protocol


class CategoryNode(Protocol):
    id: Any
    name: Any
    parent_id: Any


class CategoryTree:
    """
    In-memory index of a category hierarchy.

    Children are kept in id order so traversals are deterministic.
    Corrupt data with parent cycles is tolerated: every traversal visits
    each category at most once.
    """

    def __init__(self, categories: Iterable[CategoryNode]):
        self._by_id: dict[int, CategoryNode] = {}
        self._children: dict[int | None, list[CategoryNode]] = defaultdict(list)
        for category in sorted(categories, key=lambda c: c.id):
            self._by_id[category.id] = category
            self._children[category.parent_id].append(category)

    def __contains__(self, category_id: int) -> bool:
        return category_id in self._by_id

    def get(self, category_id: int) -> CategoryNode | None:
        return self._by_id.get(category_id)

    def roots(self) -> list[CategoryNode]:
        """Top-level categories (no parent)."""
        return list(self._children.get(None, []))

    def children(self, category_id: int) -> list[CategoryNode]:
        """Direct sub-categories."""
        return list(self._children.get(category_id, []))

    def descendants(self, category_id: int) -> list[CategoryNode]:
        """
        All sub-categories in depth-first pre-order: each child is followed
        by its own descendants before the next sibling.

        Example:
            Electronics -> [Computers, Laptop, Desktop, Phones, Smartphone]
        """
        result: list[CategoryNode] = []
        visited = {category_id}
        stack = list(reversed(self.children(category_id)))
        while stack:
            node = stack.pop()
            if node.id in visited:
                continue
            visited.add(node.id)
            result.append(node)
            stack.extend(reversed(self.children(node.id)))
        return result

    def ancestors(self, category_id: int) -> list[CategoryNode]:
        """Parent chain, nearest parent first, root last."""
        result: list[CategoryNode] = []
        visited = {category_id}
        node = self._by_id.get(category_id)
        while node is not None and node.parent_id is not None and node.parent_id not in visited:
            parent = self._by_id.get(node.parent_id)
            if parent is None:
                break
            visited.add(parent.id)
            result.append(parent)
            node = parent
        return result

    def path(self, category_id: int) -> list[str]:
        """Category names from the root down to the given category."""
        node = self._by_id.get(category_id)
        if node is None:
            return []
        return [ancestor.name for ancestor in reversed(self.ancestors(category_id))] + [node.name]

    def is_same_or_descendant(self, candidate_id: int, category_id: int) -> bool:
        """True when candidate_id is category_id itself or lies below it."""
        if candidate_id == category_id:
            return True
        return any(node.id == candidate_id for node in self.descendants(category_id))
