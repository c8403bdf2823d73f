"""
Category Service

CRUD and tree navigation for the product category hierarchy.
"""

import logging

from app.core.domain import (
    BusinessRuleViolationException,
    DuplicateEntityException,
    EntityNotFoundException,
    ValidationException,
)
from app.domains.ecommerce.application.dto import CategoryRequest
from app.domains.ecommerce.application.ports import ICategoryRepository
from app.domains.ecommerce.domain.services import CategoryTree
from app.models.db import Category

logger = logging.getLogger(__name__)


class CategoryService:
    """
    Application service for categories.

    Tree queries (descendants, ancestors, path) load the whole hierarchy once
    and walk it in memory with CategoryTree.
    """

    def __init__(self, category_repository: ICategoryRepository):
        self.category_repository = category_repository

    # ==================== Lookups ====================

    async def get_category_by_id(self, category_id: int) -> Category:
        category = await self.category_repository.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundException("Category", category_id)
        return category

    async def get_category_by_name(self, name: str) -> Category:
        category = await self.category_repository.get_by_name(name)
        if category is None:
            raise EntityNotFoundException("Category", name, message=f"Category '{name}' not found")
        return category

    async def get_all_categories(self) -> list[Category]:
        return await self.category_repository.get_all()

    async def get_top_level_categories(self) -> list[Category]:
        return await self.category_repository.get_top_level()

    # ==================== Mutations ====================

    async def resolve_category(self, name: str, parent_name: str | None = None) -> Category:
        """
        Find a category by name or create it.

        A new category is attached to parent_name, which is resolved (and
        created as a top-level category if needed) the same way. An existing
        category is returned unchanged.
        """
        name = name.strip()
        existing = await self.category_repository.get_by_name(name)
        if existing is not None:
            return existing

        parent = await self._resolve_parent(name, parent_name)
        category = await self.category_repository.save(
            Category(name=name, parent_id=parent.id if parent else None)
        )
        logger.info(f"Created category '{name}' (parent: {parent.name if parent else None})")
        return category

    async def add_category(self, request: CategoryRequest) -> Category:
        """
        Create a category.

        Raises:
            DuplicateEntityException: if a category with the same name exists
        """
        if not request.name or not request.name.strip():
            raise ValidationException("Category name is required", field="name")
        name = request.name.strip()
        if await self.category_repository.get_by_name(name) is not None:
            raise DuplicateEntityException("Category", "name", name)
        return await self.resolve_category(name, request.parent_name)

    async def update_category(self, category_id: int, request: CategoryRequest) -> Category:
        """
        Rename and/or re-parent a category.

        parent_name=None keeps the current parent, an empty string makes the
        category top-level.

        Raises:
            DuplicateEntityException: if the new name belongs to another category
            BusinessRuleViolationException: if the new parent is the category
                itself or one of its descendants
        """
        category = await self.get_category_by_id(category_id)

        name = request.name.strip() if request.name else category.name
        if name != category.name:
            other = await self.category_repository.get_by_name(name)
            if other is not None and other.id != category.id:
                raise DuplicateEntityException("Category", "name", name)
            category.name = name

        if request.parent_name is not None:
            if not request.parent_name.strip():
                category.parent_id = None
            else:
                parent_name = request.parent_name.strip()
                # The new name isn't flushed yet, so a lookup by it would miss the category
                parent = category if parent_name == name else await self.resolve_category(parent_name)
                tree = CategoryTree(await self.category_repository.get_all())
                if tree.is_same_or_descendant(parent.id, category.id):
                    raise BusinessRuleViolationException(
                        "category_cycle",
                        f"Category '{parent.name}' cannot be the parent of '{category.name}'",
                    )
                category.parent_id = parent.id

        return await self.category_repository.save(category)

    async def delete_category(self, category_id: int) -> None:
        """
        Delete a category.

        Raises:
            BusinessRuleViolationException: while it has sub-categories or products
        """
        category = await self.get_category_by_id(category_id)
        if await self.category_repository.get_children(category.id):
            raise BusinessRuleViolationException(
                "category_has_subcategories", f"Category '{category.name}' has sub-categories"
            )
        if await self.category_repository.has_products(category.id):
            raise BusinessRuleViolationException("category_has_products", f"Category '{category.name}' has products")
        await self.category_repository.delete(category)

    async def _resolve_parent(self, name: str, parent_name: str | None) -> Category | None:
        if parent_name is None or not parent_name.strip():
            return None
        if parent_name.strip() == name:
            raise ValidationException("A category cannot be its own parent", field="parent_name")
        return await self.resolve_category(parent_name)

    # ==================== Tree navigation ====================

    async def get_sub_categories_by_parent_id(self, parent_id: int) -> list[Category]:
        """Direct children of a category."""
        parent = await self.get_category_by_id(parent_id)
        return await self.category_repository.get_children(parent.id)

    async def get_sub_categories_by_parent_name(self, parent_name: str) -> list[Category]:
        parent = await self.get_category_by_name(parent_name)
        return await self.category_repository.get_children(parent.id)

    async def get_all_sub_categories_by_parent_id(self, parent_id: int) -> list[Category]:
        """Every descendant, depth-first (each child followed by its own sub-tree)."""
        parent = await self.get_category_by_id(parent_id)
        tree = CategoryTree(await self.category_repository.get_all())
        return tree.descendants(parent.id)

    async def get_all_sub_categories_by_parent_name(self, parent_name: str) -> list[Category]:
        parent = await self.get_category_by_name(parent_name)
        tree = CategoryTree(await self.category_repository.get_all())
        return tree.descendants(parent.id)

    async def get_category_path_by_id(self, category_id: int) -> list[str]:
        """Category names from the root down to the category."""
        category = await self.get_category_by_id(category_id)
        tree = CategoryTree(await self.category_repository.get_all())
        return tree.path(category.id)

    async def get_parent_categories(self, category_id: int) -> list[Category]:
        """Ancestors, nearest parent first."""
        category = await self.get_category_by_id(category_id)
        tree = CategoryTree(await self.category_repository.get_all())
        return tree.ancestors(category.id)

    async def get_category_and_descendant_ids(self, name: str) -> list[int]:
        category = await self.get_category_by_name(name)
        tree = CategoryTree(await self.category_repository.get_all())
        return [category.id] + [node.id for node in tree.descendants(category.id)]
