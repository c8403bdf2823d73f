"""
Unit Tests for CategoryService
"""

import pytest

from app.core.domain import BusinessRuleViolationException, DuplicateEntityException, ValidationException
from app.domains.ecommerce.application.dto import CategoryRequest
from app.domains.ecommerce.application.services import CategoryService
from app.models.db import Category


class InMemoryCategoryRepository:
    """Dictionary-backed ICategoryRepository."""

    def __init__(self):
        self.categories: dict[int, Category] = {}
        self.with_products: set[int] = set()

    async def get_by_id(self, category_id):
        return self.categories.get(category_id)

    async def get_by_name(self, name):
        return next((c for c in self.categories.values() if c.name.lower() == name.lower()), None)

    async def get_all(self):
        return sorted(self.categories.values(), key=lambda c: c.id)

    async def get_top_level(self):
        return [c for c in await self.get_all() if c.parent_id is None]

    async def get_children(self, parent_id):
        return [c for c in await self.get_all() if c.parent_id == parent_id]

    async def has_products(self, category_id):
        return category_id in self.with_products

    async def save(self, category):
        if category.id is None:
            category.id = len(self.categories) + 1
        self.categories[category.id] = category
        return category

    async def delete(self, category):
        del self.categories[category.id]


@pytest.fixture
def repository():
    return InMemoryCategoryRepository()


@pytest.fixture
def service(repository):
    return CategoryService(repository)


class TestCategoryService:
    @pytest.mark.asyncio
    async def test_resolve_creates_missing_parent(self, service):
        laptop = await service.resolve_category("Laptop", "Computers")

        computers = await service.get_category_by_name("Computers")
        assert computers.parent_id is None
        assert laptop.parent_id == computers.id

    @pytest.mark.asyncio
    async def test_resolve_returns_existing_unchanged(self, service):
        original = await service.resolve_category("Phones")
        again = await service.resolve_category("Phones", "Electronics")

        assert again is original
        assert again.parent_id is None

    @pytest.mark.asyncio
    async def test_add_duplicate(self, service):
        await service.add_category(CategoryRequest(name="Books"))
        with pytest.raises(DuplicateEntityException):
            await service.add_category(CategoryRequest(name="Books"))

    @pytest.mark.asyncio
    async def test_own_parent_is_rejected(self, service):
        with pytest.raises(ValidationException):
            await service.add_category(CategoryRequest(name="Loop", parent_name="Loop"))

    @pytest.mark.asyncio
    async def test_reparent_under_descendant_is_rejected(self, service):
        await service.resolve_category("Laptop", "Computers")
        computers = await service.get_category_by_name("Computers")

        with pytest.raises(BusinessRuleViolationException) as exc_info:
            await service.update_category(computers.id, CategoryRequest(parent_name="Laptop"))
        assert exc_info.value.rule == "category_cycle"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            CategoryRequest(parent_name="Computers"),
            CategoryRequest(name="Hardware", parent_name="Hardware"),
        ],
    )
    async def test_reparent_under_itself_is_a_cycle(self, service, repository, payload):
        computers = await service.resolve_category("Computers")

        with pytest.raises(BusinessRuleViolationException) as exc_info:
            await service.update_category(computers.id, payload)
        assert exc_info.value.rule == "category_cycle"
        assert len(repository.categories) == 1

    @pytest.mark.asyncio
    async def test_empty_parent_moves_to_top_level(self, service):
        laptop = await service.resolve_category("Laptop", "Computers")
        updated = await service.update_category(laptop.id, CategoryRequest(name="Notebook", parent_name=""))

        assert updated.name == "Notebook"
        assert updated.parent_id is None

    @pytest.mark.asyncio
    async def test_tree_queries(self, service):
        await service.resolve_category("Computers", "Electronics")
        await service.resolve_category("Laptop", "Computers")
        await service.resolve_category("Phones", "Electronics")
        electronics = await service.get_category_by_name("Electronics")
        laptop = await service.get_category_by_name("Laptop")

        descendants = await service.get_all_sub_categories_by_parent_id(electronics.id)
        assert [c.name for c in descendants] == ["Computers", "Laptop", "Phones"]
        assert [c.name for c in await service.get_sub_categories_by_parent_name("Electronics")] == [
            "Computers",
            "Phones",
        ]
        assert await service.get_category_path_by_id(laptop.id) == ["Electronics", "Computers", "Laptop"]
        assert [c.name for c in await service.get_parent_categories(laptop.id)] == ["Computers", "Electronics"]

    @pytest.mark.asyncio
    async def test_delete_rules(self, service, repository):
        await service.resolve_category("Laptop", "Computers")
        computers = await service.get_category_by_name("Computers")
        laptop = await service.get_category_by_name("Laptop")

        with pytest.raises(BusinessRuleViolationException):
            await service.delete_category(computers.id)

        repository.with_products.add(laptop.id)
        with pytest.raises(BusinessRuleViolationException):
            await service.delete_category(laptop.id)

        repository.with_products.clear()
        await service.delete_category(laptop.id)
        await service.delete_category(computers.id)
        assert await service.get_all_categories() == []
