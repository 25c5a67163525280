"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from domain.services.action_service import ActionService
from domain.services.comment_service import CommentService
from domain.services.ledger_service import LedgerService
from domain.services.multi_step_action_service import MultiStepActionService
from domain.services.session_controller import SessionControllerRegistry
from domain.services.space_service import SpaceService
from domain.services.todo_service import TodoService
from domain.services.waste_service import WasteService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_ledger_service() -> LedgerService:
    """Get Ledger service instance."""
    return LedgerService(get_uow_factory())


@lru_cache
def get_session_registry() -> SessionControllerRegistry:
    """Get the process-wide registry of per-space session controllers."""
    return SessionControllerRegistry(get_uow_factory(), ledger=get_ledger_service())


@lru_cache
def get_space_service() -> SpaceService:
    """Get Space service instance."""
    return SpaceService(get_uow_factory(), sessions=get_session_registry())


@lru_cache
def get_action_service() -> ActionService:
    """Get Action service instance."""
    return ActionService(get_uow_factory())


@lru_cache
def get_multi_step_action_service() -> MultiStepActionService:
    """Get Multi-step Action service instance."""
    return MultiStepActionService(get_uow_factory())


@lru_cache
def get_waste_service() -> WasteService:
    """Get Waste service instance."""
    return WasteService(get_uow_factory())


@lru_cache
def get_todo_service() -> TodoService:
    """Get To-do service instance."""
    return TodoService(get_uow_factory())


@lru_cache
def get_comment_service() -> CommentService:
    """Get Comment service instance."""
    return CommentService(get_uow_factory())
