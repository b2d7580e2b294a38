import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from group_mailer.api.routes.router import api_router
from group_mailer.core.config import settings
from group_mailer.core.firebase import init_firebase
from group_mailer.core.logging_config import setup_logging
from group_mailer.services.group_store import GroupStore
from group_mailer.services.mailer import Mailer

logger = logging.getLogger(__name__)

app = FastAPI(title="Doctor Group Mailer")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup():
    """Build the Firestore and mail handles once and keep them on app.state."""
    setup_logging(settings.LOG_LEVEL)

    db = init_firebase(settings.FIREBASE_CREDENTIALS)
    app.state.store = GroupStore(db)
    app.state.mailer = Mailer(settings)

    logger.info("Server is running on port %s", settings.PORT)


@app.on_event("shutdown")
async def shutdown():
    store = getattr(app.state, "store", None)
    if store is not None:
        await store.close()
    app.state.store = None
    app.state.mailer = None
    logger.info("Server stopped")


@app.get("/")
async def root():
    return {"message": "Doctor Group Mailer is running"}


@app.get("/health")
async def health_check():
    return {"status": "ok"}


# Include API routers
app.include_router(api_router)
