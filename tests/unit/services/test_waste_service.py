"""Unit tests for Waste service layer."""

from uuid import UUID, uuid4

import pytest

from core.exceptions import SpaceNotFoundError, ValidationError, WasteEntryNotFoundError
from domain.entities.space import Space
from domain.entities.waste import WasteEntry
from domain.services.waste_service import WasteService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork, space: Space) -> WasteService:
    uow.spaces.get.return_value = space
    uow.waste.create.side_effect = lambda e: e
    return WasteService(lambda: uow)


class TestCategories:
    def test_timwoods_weights(self) -> None:
        categories = WasteService.categories()

        assert [c.id for c in categories] == [
            "transportation",
            "inventory",
            "motion",
            "waiting",
            "overprocessing",
            "overproduction",
            "defects",
            "skills",
        ]
        assert [c.points for c in categories] == [1, 2, 3, 4, 5, 6, 7, 8]


class TestAddEntries:
    @pytest.mark.asyncio
    async def test_one_entry_per_category(
        self, service: WasteService, uow: FakeUnitOfWork, space_id: UUID
    ) -> None:
        entries = await service.add_entries(space_id, ["motion", "skills"])

        assert [(e.type, e.points) for e in entries] == [("motion", 3), ("skills", 8)]
        assert all(e.space_id == space_id for e in entries)
        uow.spaces.update.assert_called_once_with(space_id)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_unknown_ids_skipped(
        self, service: WasteService, uow: FakeUnitOfWork, space_id: UUID
    ) -> None:
        entries = await service.add_entries(space_id, ["waiting", "laziness"])

        assert [e.type for e in entries] == ["waiting"]
        assert uow.waste.create.call_count == 1

    @pytest.mark.asyncio
    async def test_no_valid_ids_rejected(
        self, service: WasteService, uow: FakeUnitOfWork, space_id: UUID
    ) -> None:
        with pytest.raises(ValidationError):
            await service.add_entries(space_id, ["laziness"])

        uow.waste.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_space(self, service: WasteService, uow: FakeUnitOfWork) -> None:
        uow.spaces.get.return_value = None

        with pytest.raises(SpaceNotFoundError):
            await service.add_entries(uuid4(), ["motion"])


class TestTotalsAndDelete:
    @pytest.mark.asyncio
    async def test_total_points(
        self, service: WasteService, uow: FakeUnitOfWork, space_id: UUID
    ) -> None:
        uow.waste.list_by_space.return_value = [
            WasteEntry(space_id=space_id, type="defects", points=7),
            WasteEntry(space_id=space_id, type="inventory", points=2),
        ]

        assert await service.total_points(space_id) == 9

    @pytest.mark.asyncio
    async def test_delete_entry_of_other_space(
        self, service: WasteService, uow: FakeUnitOfWork, space_id: UUID
    ) -> None:
        uow.waste.get.return_value = WasteEntry(space_id=uuid4(), type="motion", points=3)

        with pytest.raises(WasteEntryNotFoundError):
            await service.delete(space_id, uuid4())

        uow.waste.delete.assert_not_called()
