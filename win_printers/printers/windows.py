import logging
from typing import List, Optional

from win_printers.models import Printer
from win_printers.parser import is_valid_printer, parse_printers
from win_printers.platform_guard import throw_if_unsupported_os
from win_printers.shell import run_powershell

logger = logging.getLogger(__name__)

LIST_PRINTERS_COMMAND = "Get-CimInstance Win32_Printer -Property DeviceID,Name,PrinterPaperNames"
DEFAULT_PRINTER_COMMAND = LIST_PRINTERS_COMMAND + " -Filter Default=true"


class WindowsPrinterProvider:
    async def list_printers(self) -> List[Printer]:
        throw_if_unsupported_os()
        stdout = await run_powershell(LIST_PRINTERS_COMMAND)
        printers = parse_printers(stdout)
        logger.info("Detected %d Windows printers", len(printers))
        return printers

    async def get_default_printer(self) -> Optional[Printer]:
        throw_if_unsupported_os()
        stdout = await run_powershell(DEFAULT_PRINTER_COMMAND)

        block = stdout.strip()
        # sin salida = no hay impresora por defecto
        if not block:
            return None

        result = is_valid_printer(block)
        if not result.is_valid:
            logger.debug("Default printer output without DeviceID/Name: %r", block)
            return None
        return result.printer_data
