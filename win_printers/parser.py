"""
Parseo de la salida de `Get-CimInstance Win32_Printer`.

PowerShell imprime un bloque por impresora, separados por líneas vacías,
cada línea un par `Etiqueta : valor`:

    DeviceID          : HP01
    Name              : HP LaserJet
    PrinterPaperNames : {A4, Letter}

Los bloques sin DeviceID o sin Name se descartan, no se reportan.
"""
import logging
import re
from typing import Dict, List

from win_printers.models import Printer, PrinterParseResult

logger = logging.getLogger(__name__)

# un salto de línea seguido de una o más líneas vacías
_BLOCK_SEPARATOR = re.compile(r"\r?\n(?:[ \t]*\r?\n)+")

DEVICE_ID_LABEL = "deviceid"
NAME_LABEL = "name"
PAPER_NAMES_LABEL = "printerpapernames"


def parse_blocks(text: str) -> List[str]:
    """Divide la salida en bloques recortados y no vacíos."""
    blocks = []
    for block in _BLOCK_SEPARATOR.split(text or ""):
        block = block.strip()
        if block:
            blocks.append(block)
    return blocks


def parse_paper_sizes(value: str) -> List[str]:
    value = (value or "").strip().strip("{}")
    return [p.strip() for p in value.split(",") if p.strip()]


def _read_fields(block: str) -> Dict[str, str]:
    fields: Dict[str, str] = {}
    for line in block.splitlines():
        label, sep, value = line.partition(":")
        if not sep:
            continue
        # primera aparición gana
        fields.setdefault(label.strip().lower(), value.strip())
    return fields


def is_valid_printer(block: str) -> PrinterParseResult:
    fields = _read_fields(block)
    device_id = fields.get(DEVICE_ID_LABEL, "")
    name = fields.get(NAME_LABEL, "")

    if not device_id or not name:
        return PrinterParseResult(is_valid=False, printer_data=None)

    printer = Printer(
        device_id=device_id,
        name=name,
        paper_sizes=parse_paper_sizes(fields.get(PAPER_NAMES_LABEL, "")),
    )
    return PrinterParseResult(is_valid=True, printer_data=printer)


def parse_printers(text: str) -> List[Printer]:
    printers: List[Printer] = []
    for block in parse_blocks(text):
        result = is_valid_printer(block)
        if not result.is_valid:
            logger.debug("Skipping printer block without DeviceID/Name: %r", block)
            continue
        printers.append(result.printer_data)
    return printers
