import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from guesthouse.config import Settings, settings as default_settings
from guesthouse.database import Database
from guesthouse.errors import StorageError, register_exception_handlers
from guesthouse.seed import seed_sample_data

# Import routes
from guesthouse.routes import inventory, rooms, clients, categories, bookings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.database
    settings: Settings = app.state.settings

    # Fail fast: never serve requests on top of a dead pool
    try:
        database.open()
        database.healthcheck()
        database.create_schema()
        if settings.SEED_SAMPLE_DATA:
            db = database.session()
            try:
                seed_sample_data(db)
            finally:
                db.close()
    except StorageError:
        logger.critical("Database unavailable at startup, refusing to serve")
        database.close()
        raise

    logger.info("Dreams Bar backend ready (%s)", settings.ENVIRONMENT)
    yield
    database.close()


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Create FastAPI app
    app = FastAPI(
        title="Dreams Bar & Guesthouse API",
        description="Inventory, rooms, clients and bookings for the guesthouse admin",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database or Database(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(inventory.router, prefix="/api/inventory", tags=["Inventory"])
    app.include_router(rooms.router, prefix="/api/rooms", tags=["Rooms"])
    app.include_router(clients.router, prefix="/api/clients", tags=["Clients"])
    app.include_router(categories.router, prefix="/api/categories", tags=["Categories"])
    app.include_router(bookings.router, prefix="/api/bookings", tags=["Bookings"])

    # Root endpoint
    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "Dreams Bar Backend API is running!"

    # Health check
    @app.get("/health")
    def health_check(request: Request):
        try:
            request.app.state.database.healthcheck()
        except StorageError:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy", "database": "unreachable"},
            )
        return {"status": "healthy", "database": "connected", "environment": settings.ENVIRONMENT}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
