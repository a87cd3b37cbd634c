import logging
from typing import List, Optional

from fastapi import FastAPI, Depends, HTTPException

from win_printers import env
from win_printers.audit import audit
from win_printers.errors import ProcessError, UnsupportedPlatformError
from win_printers.models import Printer
from win_printers.printers import get_default_printer, get_printers
from win_printers.security import verify_agent_token

logger = logging.getLogger(__name__)

app = FastAPI(title="Windows Printer Agent")


def _to_http_error(e: Exception) -> HTTPException:
    if isinstance(e, UnsupportedPlatformError):
        return HTTPException(status_code=501, detail=str(e))
    return HTTPException(status_code=502, detail=str(e))


@app.get("/health")
def health():
    # público: para saber si está vivo (sin datos sensibles)
    return {"ok": True, "agent_id": env.AGENT_ID, "name": env.AGENT_NAME}


@app.get("/printers", response_model=List[Printer], dependencies=[Depends(verify_agent_token)])
async def list_printers():
    try:
        printers = await get_printers()
    except (UnsupportedPlatformError, ProcessError) as e:
        logger.error("Printer query failed: %s", e)
        audit("printers_error", {"error": str(e)})
        raise _to_http_error(e)
    audit("printers_listed", {"count": len(printers)})
    return printers


@app.get("/printers/default", response_model=Optional[Printer], dependencies=[Depends(verify_agent_token)])
async def default_printer():
    try:
        printer = await get_default_printer()
    except (UnsupportedPlatformError, ProcessError) as e:
        logger.error("Default printer query failed: %s", e)
        audit("printers_error", {"error": str(e)})
        raise _to_http_error(e)
    audit("default_printer", {"device_id": printer.device_id if printer else None})
    return printer
