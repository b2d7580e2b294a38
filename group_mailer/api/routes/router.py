from fastapi import APIRouter

from group_mailer.api.routes.groups import router as groups_router
from group_mailer.api.routes.doctors import router as doctors_router
from group_mailer.api.routes.notifications import router as notifications_router

api_router = APIRouter()

# Groups and their doctors
api_router.include_router(groups_router)
api_router.include_router(doctors_router)

# Email dispatch and history
api_router.include_router(notifications_router)
