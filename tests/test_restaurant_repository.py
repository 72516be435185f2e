"""
Tests for the SQLAlchemy restaurant repository.
"""
import pytest

from flavorfare.models.restaurant import Restaurant
from flavorfare.repositories.restaurant_repository import SqlAlchemyRestaurantRepository


@pytest.fixture
def repository(db):
    return SqlAlchemyRestaurantRepository(db)


class TestSqlAlchemyRestaurantRepository:
    """Tests for the store primitives."""

    def test_save_assigns_id(self, repository):
        """Saving a new entity should populate its id."""
        restaurant = repository.save(Restaurant(name="Cafe Nord"))

        assert restaurant.id is not None
        assert restaurant.id > 0
        assert restaurant.created_at is not None

    def test_find_all_orders_by_id(self, repository):
        """find_all should return rows in insertion (id) order."""
        for name in ["Zeta", "Alpha", "Mu"]:
            repository.save(Restaurant(name=name))

        names = [r.name for r in repository.find_all()]

        assert names == ["Zeta", "Alpha", "Mu"]

    def test_find_by_id_missing_returns_none(self, repository):
        """An unknown id should give None rather than raise."""
        assert repository.find_by_id(999) is None

    def test_save_existing_updates_in_place(self, repository):
        """Saving a loaded entity should update it without changing its id."""
        restaurant = repository.save(Restaurant(name="Old Name"))
        original_id = restaurant.id

        restaurant.name = "New Name"
        repository.save(restaurant)

        reloaded = repository.find_by_id(original_id)
        assert reloaded.name == "New Name"
        assert len(repository.find_all()) == 1

    def test_delete_by_id_removes_row(self, repository):
        """delete_by_id should remove the row."""
        restaurant = repository.save(Restaurant(name="Short Lived"))

        repository.delete_by_id(restaurant.id)

        assert repository.find_by_id(restaurant.id) is None
        assert repository.find_all() == []

    def test_delete_by_id_missing_is_noop(self, repository):
        """Deleting an unknown id should leave other rows alone."""
        repository.save(Restaurant(name="Survivor"))

        repository.delete_by_id(12345)

        assert len(repository.find_all()) == 1

    def test_find_by_id_out_of_range_returns_none(self, repository):
        """Ids beyond the integer column never reach the database."""
        assert repository.find_by_id(2**31) is None
        assert repository.find_by_id(2**63) is None
        assert repository.find_by_id(0) is None
