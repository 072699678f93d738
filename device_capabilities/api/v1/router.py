from fastapi import APIRouter

from device_capabilities.domains.device.api.device_api import router as device_router
from device_capabilities.domains.software.api.software_api import (
    router as software_router,
)
from device_capabilities.domains.band.api.band_api import router as band_router
from device_capabilities.domains.combo.api.combo_api import router as combo_router
from device_capabilities.domains.feature.api.feature_api import (
    router as feature_router,
)
from device_capabilities.domains.provider.api.provider_api import (
    router as provider_router,
)

api_router = APIRouter()

# 設備與軟體版本
api_router.include_router(device_router, prefix="/devices", tags=["Devices"])
api_router.include_router(software_router, prefix="/devices", tags=["Software"])

# 能力目錄
api_router.include_router(band_router, prefix="/bands", tags=["Bands"])
api_router.include_router(combo_router, prefix="/combos", tags=["Combos"])
api_router.include_router(feature_router, prefix="/features", tags=["Features"])
api_router.include_router(provider_router, prefix="/providers", tags=["Providers"])
