import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from db import create_db_engine, create_session_factory
from admission.routes import router as admission_router, request_validation_handler
from admission.storage import AnalysisStore
from admission.logic.engine import AdmissionEngine
from admission.ai.advisor import AIAdvisor

load_dotenv()

logging.basicConfig(level=logging.INFO)


def create_app(
    database_url: Optional[str] = None,
    engine: Optional[AdmissionEngine] = None,
    advisor: Optional[AIAdvisor] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    The store, engine and advisor are created once here and torn down with
    the application; handlers receive them through dependencies.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db_engine = create_db_engine(database_url)
        store = AnalysisStore(create_session_factory(db_engine))
        store.create_tables(db_engine)

        app.state.store = store
        app.state.engine = engine or AdmissionEngine()
        app.state.advisor = advisor if advisor is not None else AIAdvisor()
        logging.info(f"App starting (AI advisor enabled: {app.state.advisor.enabled})")
        try:
            yield
        finally:
            db_engine.dispose()
            logging.info("App shut down")

    app = FastAPI(title="College Admission Chance Engine", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(admission_router)
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn (HOST / PORT from the environment)."""
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
