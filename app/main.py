from __future__ import annotations

from fastapi import FastAPI

from app.api.errors import register_error_handlers
from app.api.middleware.cors import CorsMiddleware
from app.api.routers.billing import router as billing_router
from app.api.routers.root import router as root_router
from app.shared.config import get_settings
from app.shared.logging_config import setup_logging


setup_logging(get_settings().log_level)

app = FastAPI(title="Billing Gateway")
app.add_middleware(CorsMiddleware)
register_error_handlers(app)

app.include_router(root_router)
app.include_router(billing_router)
