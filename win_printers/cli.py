import argparse
import json
import logging
import sys

from win_printers import env
from win_printers.errors import PrinterQueryError
from win_printers.printers import get_default_printer_sync, get_printers_sync

logger = logging.getLogger("win_printers")


def _dump(data) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="win-printers",
        description="Consulta las impresoras instaladas en Windows.",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="Lista todas las impresoras (JSON)")
    sub.add_parser("default", help="Muestra la impresora por defecto (JSON)")
    serve = sub.add_parser("serve", help="Inicia el agente HTTP")
    serve.add_argument("--host", default=env.AGENT_HOST)
    serve.add_argument("--port", type=int, default=env.AGENT_PORT)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=env.LOG_LEVEL.upper())

    if args.command == "serve":
        import uvicorn

        logger.info("Agent %s listening on %s:%s", env.AGENT_ID, args.host, args.port)
        uvicorn.run("win_printers.api:app", host=args.host, port=args.port)
        return 0

    try:
        if args.command == "list":
            printers = get_printers_sync()
            print(_dump([p.model_dump(by_alias=True) for p in printers]))
        else:
            printer = get_default_printer_sync()
            print(_dump(printer.model_dump(by_alias=True) if printer else None))
    except PrinterQueryError as e:
        print(f"Error al obtener impresoras: {e}", file=sys.stderr)
        return 1
    return 0
