from fastapi import FastAPI
from cashflow.api.v1.routes.settlement import router as settlement_router
from cashflow.api.v1.routes.system import router as system_router
from cashflow.core.config import settings
from cashflow.core.logging import setup_logging

setup_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_NAME)

@app.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} is live"}

app.include_router(system_router, prefix="/api/v1/system")
app.include_router(settlement_router, prefix="/api/v1/settlements")
