from analysehub.routers.campaigns import router as campaigns_router
from analysehub.routers.adsets import router as adsets_router
from analysehub.routers.ads import router as ads_router
from analysehub.routers.metrics import router as metrics_router
from analysehub.routers.dashboard import router as dashboard_router

__all__ = [
    "campaigns_router",
    "adsets_router",
    "ads_router",
    "metrics_router",
    "dashboard_router",
]
