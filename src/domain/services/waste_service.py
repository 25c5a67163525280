"""Waste tracking service."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import SpaceNotFoundError, ValidationError, WasteEntryNotFoundError
from domain.entities.waste import CATEGORIES_BY_ID, TIMWOODS_CATEGORIES, WasteCategory, WasteEntry
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.scoring import total_waste_points

logger = structlog.get_logger()


class WasteService:
    """Service layer for logging TIMWOODS waste against a space."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    @staticmethod
    def categories() -> list[WasteCategory]:
        return list(TIMWOODS_CATEGORIES)

    async def add_entries(self, space_id: UUID, category_ids: list[str]) -> list[WasteEntry]:
        """Log one waste entry per category id.

        Unknown ids are skipped with a warning. Raises ValidationError when
        no id is recognised.
        """
        categories = []
        for category_id in category_ids:
            category = CATEGORIES_BY_ID.get(category_id)
            if category is None:
                logger.warning(
                    "unknown_waste_category_skipped",
                    space_id=str(space_id),
                    category_id=category_id,
                )
                continue
            categories.append(category)

        if not categories:
            raise ValidationError(
                "No valid waste categories given",
                details={"category_ids": category_ids},
            )

        async with self._uow_factory() as uow:
            await self._require_space(uow, space_id)
            created = [
                await uow.waste.create(
                    WasteEntry(space_id=space_id, type=category.id, points=category.points)
                )
                for category in categories
            ]
            await uow.spaces.update(space_id)
            await uow.commit()

        logger.info("waste_logged", space_id=str(space_id), count=len(created))
        return created

    async def list_for_space(self, space_id: UUID) -> list[WasteEntry]:
        """Get waste entries of a space, newest first."""
        async with self._uow_factory() as uow:
            await self._require_space(uow, space_id)
            return await uow.waste.list_by_space(space_id)  # type: ignore[no-any-return]

    async def total_points(self, space_id: UUID) -> int:
        return total_waste_points(await self.list_for_space(space_id))

    async def delete(self, space_id: UUID, entry_id: UUID) -> bool:
        async with self._uow_factory() as uow:
            entry = await uow.waste.get(entry_id)
            if not entry or entry.space_id != space_id:
                raise WasteEntryNotFoundError(str(entry_id))
            deleted = await uow.waste.delete(entry_id)
            await uow.spaces.update(space_id)
            await uow.commit()
            return deleted  # type: ignore[no-any-return]

    @staticmethod
    async def _require_space(uow: IUnitOfWork, space_id: UUID) -> None:
        if not await uow.spaces.get(space_id):
            raise SpaceNotFoundError(str(space_id))
