"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.actions import router as actions_router
from api.v1.routes.comments import router as comments_router
from api.v1.routes.multi_step_actions import router as multi_step_actions_router
from api.v1.routes.session import router as session_router
from api.v1.routes.spaces import router as spaces_router
from api.v1.routes.todos import router as todos_router
from api.v1.routes.waste import categories_router as waste_categories_router
from api.v1.routes.waste import router as waste_router

router = APIRouter()
router.include_router(spaces_router)
router.include_router(session_router)
router.include_router(actions_router)
router.include_router(multi_step_actions_router)
router.include_router(waste_router)
router.include_router(waste_categories_router)
router.include_router(todos_router)
router.include_router(comments_router)
