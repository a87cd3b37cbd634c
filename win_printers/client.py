import logging
from typing import Dict, List, Optional

import requests

from win_printers import env
from win_printers.errors import AgentNotConfiguredError
from win_printers.models import Printer

logger = logging.getLogger(__name__)


def _headers(token: Optional[str]) -> Dict[str, str]:
    return {"X-Agent-Token": token} if token else {}


def _resolve_agent_url(agent_url: Optional[str] = None) -> str:
    url = agent_url or env.PRINT_AGENT_URL
    if not url:
        raise AgentNotConfiguredError()
    return url.rstrip("/")


def fetch_printers(
    agent_url: Optional[str] = None,
    token: Optional[str] = None,
    timeout: int = 5,
) -> List[Printer]:
    """
    Lista las impresoras de un agente remoto (GET /printers).

    Errores HTTP se propagan como requests.HTTPError.
    """
    base_url = _resolve_agent_url(agent_url)
    resp = requests.get(
        f"{base_url}/printers",
        headers=_headers(token if token is not None else env.PRINT_AGENT_TOKEN),
        timeout=timeout,
    )
    resp.raise_for_status()
    return [Printer.model_validate(p) for p in resp.json()]


def fetch_default_printer(
    agent_url: Optional[str] = None,
    token: Optional[str] = None,
    timeout: int = 5,
) -> Optional[Printer]:
    base_url = _resolve_agent_url(agent_url)
    resp = requests.get(
        f"{base_url}/printers/default",
        headers=_headers(token if token is not None else env.PRINT_AGENT_TOKEN),
        timeout=timeout,
    )
    resp.raise_for_status()
    data = resp.json()
    if data is None:
        logger.info("Agent %s has no default printer", base_url)
        return None
    return Printer.model_validate(data)
