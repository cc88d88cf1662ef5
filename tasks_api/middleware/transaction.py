# tasks_api/middleware/transaction.py
import logging

from fastapi import Request
from fastapi.responses import JSONResponse

log = logging.getLogger(__name__)


async def with_transaction(request: Request, call_next):
    """Outermost error boundary. No real transaction: the store is in-memory."""
    try:
        return await call_next(request)
    except Exception as e:
        log.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": str(e)})
