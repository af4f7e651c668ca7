#simlog_app/main.py
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from simlog_app import config
from simlog_app.auth import router as auth_router
from simlog_app.dashboard import router as dashboard_router
from simlog_app.instructor import router as instructor_router
from simlog_app.maintenance import router as maintenance_router
from simlog_app.models import COMPONENTS, INSTRUCTORS, SIMULATORS, IssueSeverity, SessionType
from simlog_app.storage import SimLogStore


def create_app(db_path: Optional[str] = None) -> FastAPI:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="SimLog Pro API")
    app.state.store = SimLogStore(db_path or config.DB_PATH)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(auth_router, tags=["Auth"])
    app.include_router(instructor_router, prefix="/instructor", tags=["Instructor"])
    app.include_router(maintenance_router, prefix="/maintenance", tags=["Maintenance"])
    app.include_router(dashboard_router, prefix="/dashboard", tags=["Owner Dashboard"])

    @app.get("/reference-data", tags=["Reference"])
    def reference_data():
        return {
            "instructors": INSTRUCTORS,
            "components": COMPONENTS,
            "simulators": SIMULATORS,
            "severities": [s.value for s in IssueSeverity],
            "session_types": [t.value for t in SessionType],
        }

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()
