import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from analysehub.config import settings
from analysehub.routers import (
    ads_router,
    adsets_router,
    campaigns_router,
    dashboard_router,
    metrics_router,
)
from analysehub.services import DashboardLoader, StaticFileProvider, build_provider
from analysehub.state import DashboardStore

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    # Startup: build the store and run the initial load
    app.state.fixtures = StaticFileProvider(settings.data_dir)
    provider = build_provider(settings)
    app.state.store = DashboardStore(default_range_days=settings.default_date_range_days)
    app.state.loader = DashboardLoader(
        app.state.store,
        provider,
        error_timeout_seconds=settings.error_message_timeout_seconds,
        fetch_timeout_seconds=settings.fetch_timeout_seconds,
    )
    await app.state.loader.load()
    logger.info(f"Dashboard ready (provider: {provider.get_platform_name()})")
    yield
    # Shutdown: drop the pending error timeout and close HTTP clients
    await app.state.loader.close()
    if hasattr(provider, "aclose"):
        await provider.aclose()


app = FastAPI(
    title="AnalyseHub Dashboard API",
    description="Campaign, ad set and ad browsing with selection and date-range filters",
    version="2.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Fixture data API (stand-in for the upstream ad platform API)
app.include_router(campaigns_router)
app.include_router(adsets_router)
app.include_router(ads_router)
app.include_router(metrics_router)

# Dashboard state
app.include_router(dashboard_router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "ok",
        "message": "AnalyseHub Dashboard API",
        "version": "2.0.0"
    }


@app.get("/health")
async def health():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "analysehub.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True
    )
