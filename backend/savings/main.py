import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from savings.core.config import settings
from savings.api.routes.balance import router as balance_router
from savings.api.routes.transactions import router as tx_router
from savings.api.routes.rates import router as rates_router
from savings.api.routes.accrual import router as accrual_router
from savings.api.routes.export import router as export_router
from savings.init_db import main as init_db
from savings.utils.dates import InvalidInput

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI()

origins = [o.strip() for o in (settings.cors_origins or "").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(InvalidInput)
async def _invalid_input(request: Request, exc: InvalidInput):
    logger.warning("rejected %s %s: %s", request.method, request.url.path, exc)
    detail = str(exc.args[0]).split(":", 1)[0] if exc.args else "invalid_input"
    return JSONResponse(status_code=400, content={"detail": detail})

@app.get("/health")
@app.get("/api/health")
def health():
    return {"status": "ok"}

app.include_router(balance_router)
app.include_router(tx_router)
app.include_router(rates_router)
app.include_router(accrual_router)
app.include_router(export_router)

@app.on_event("startup")
def _create_tables():
    if settings.auto_create_tables:
        init_db()
