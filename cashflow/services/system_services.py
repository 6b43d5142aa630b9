from cashflow.core.config import settings

async def system_health():
    return {
        "status": "ok"
    }

async def system_info():
    return {
        "name": settings.APP_NAME,
        "max_transactions": settings.MAX_TRANSACTIONS,
        "amount_limit": settings.AMOUNT_LIMIT
    }
