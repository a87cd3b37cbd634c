import asyncio
import logging

from win_printers import env
from win_printers.errors import ProcessError

logger = logging.getLogger(__name__)

# PowerShell 5.1 escribe en la página de códigos de la consola si no se fuerza
UTF8_OUTPUT_PREFIX = "[Console]::OutputEncoding=[Text.Encoding]::UTF8; "
ENCODING = "utf-8"


def _decode(data: bytes) -> str:
    # bytes inválidos -> U+FFFD, nunca se descartan
    return data.decode(ENCODING, errors="replace").lstrip("\ufeff")


async def run_powershell(command: str) -> str:
    """
    Ejecuta `command` con PowerShell y devuelve stdout como texto.

    La salida se fuerza a UTF-8. Lanza ProcessError si el ejecutable no
    existe o termina con código != 0.
    """
    logger.debug("Running PowerShell command: %s", command)
    try:
        proc = await asyncio.create_subprocess_exec(
            env.POWERSHELL_EXE,
            "-Command",
            UTF8_OUTPUT_PREFIX + command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise ProcessError(command, None, str(e)) from e

    stdout, stderr = await proc.communicate()
    if proc.returncode != 0:
        raise ProcessError(command, proc.returncode, _decode(stderr))
    return _decode(stdout)
