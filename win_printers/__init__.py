from win_printers.errors import PrinterQueryError, ProcessError, UnsupportedPlatformError
from win_printers.models import Printer
from win_printers.printers import (
    get_default_printer,
    get_default_printer_sync,
    get_printers,
    get_printers_sync,
)

__all__ = [
    "Printer",
    "PrinterQueryError",
    "ProcessError",
    "UnsupportedPlatformError",
    "get_default_printer",
    "get_default_printer_sync",
    "get_printers",
    "get_printers_sync",
]
