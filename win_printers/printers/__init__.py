import asyncio
from typing import List, Optional

from win_printers.models import Printer
from win_printers.printers.windows import WindowsPrinterProvider

printer_provider = WindowsPrinterProvider()


async def get_printers() -> List[Printer]:
    """
    Lista todas las impresoras instaladas.

    Lanza UnsupportedPlatformError fuera de Windows y ProcessError si
    PowerShell falla.
    """
    return await printer_provider.list_printers()


async def get_default_printer() -> Optional[Printer]:
    """Impresora por defecto, o None si no hay ninguna configurada."""
    return await printer_provider.get_default_printer()


def get_printers_sync() -> List[Printer]:
    return asyncio.run(get_printers())


def get_default_printer_sync() -> Optional[Printer]:
    return asyncio.run(get_default_printer())
