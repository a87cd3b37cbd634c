import platform
from typing import Optional

from win_printers.errors import UnsupportedPlatformError

SUPPORTED_SYSTEM = "Windows"


def throw_if_unsupported_os(system: Optional[str] = None) -> None:
    """Lanza UnsupportedPlatformError si no se ejecuta en Windows."""
    sistema = system if system is not None else platform.system()
    if sistema != SUPPORTED_SYSTEM:
        raise UnsupportedPlatformError(sistema)
