from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from src.app.services.errors import StoreUnavailableError
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = exc.to_dict()
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = exc.to_dict()
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_store_unavailable(request: Request, exc: StoreUnavailableError):
    error_dict = {"code": "STORE_UNAVAILABLE", "message": "Internal server error"}
    logger.error(f"Store unavailable on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def build_lifespan(ApplicationConfig):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create tables and seed the default admin when the API boots."""
        import src.domain.entities  # noqa: F401  registers table metadata
        from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
        from src.app.use_cases.admin import EnsureDefaultAdminUseCase
        from src.depends import AsyncSessionLocal, engine

        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        if ApplicationConfig.DEFAULT_ADMIN_PASSWORD:
            async with AsyncSessionLocal() as session:
                await EnsureDefaultAdminUseCase(SqlAlchemyUnitOfWork(session)).execute(
                    name=ApplicationConfig.DEFAULT_ADMIN_NAME,
                    email=ApplicationConfig.DEFAULT_ADMIN_EMAIL,
                    password=ApplicationConfig.DEFAULT_ADMIN_PASSWORD,
                    avatar_url_template=ApplicationConfig.AVATAR_URL_TEMPLATE,
                )

        yield

        await engine.dispose()

    return lifespan


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(
        title="Template Manager Auth API",
        version="0.1.0",
        lifespan=build_lifespan(ApplicationConfig),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import admin, auth, health_check, user

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(user.router, tags=["User"])
    app.include_router(admin.router, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(StoreUnavailableError, handle_store_unavailable)

    return app
