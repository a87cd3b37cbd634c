class PrinterQueryError(Exception):
    """Error base de las consultas de impresoras."""


class UnsupportedPlatformError(PrinterQueryError):
    def __init__(self, system: str):
        self.system = system
        super().__init__(f"Sistema operativo no soportado: {system or 'desconocido'}")


class ProcessError(PrinterQueryError):
    """PowerShell no se pudo ejecutar o terminó con error."""

    def __init__(self, command: str, returncode=None, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            msg = f"No se pudo ejecutar el comando: {stderr}"
        else:
            msg = f"El comando terminó con código {returncode}: {stderr.strip()}"
        super().__init__(msg)


class AgentNotConfiguredError(PrinterQueryError):
    def __init__(self):
        super().__init__("No hay agente configurado. Defina PRINT_AGENT_URL.")
