from __future__ import annotations

import argparse
import asyncio
import signal
import socket
import sys
import traceback
from pathlib import Path

import uvicorn

from netledger.core import config as core_config


def _bind_listen_socket(host: str, port: int) -> tuple[socket.socket, int]:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(2048)
        return sock, int(sock.getsockname()[1])
    except Exception:
        sock.close()
        raise


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="netledger",
        description="Serve host network usage and a rolling daily usage ledger over HTTP.",
    )
    parser.add_argument("--host", default=core_config.HOST, help="Address to bind.")
    parser.add_argument(
        "--port",
        type=int,
        default=core_config.PORT,
        help="Port to bind. Use 0 to choose a free port.",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=core_config.DB_PATH,
        help="SQLite database file holding the daily ledger.",
    )
    parser.add_argument(
        "--record-interval",
        type=int,
        default=core_config.RECORD_INTERVAL_SECONDS,
        help="Record today's usage every N seconds. 0 disables the recorder.",
    )
    parser.add_argument("--log-level", default=core_config.LOG_LEVEL)
    args = parser.parse_args(argv)

    if args.port < 0 or args.port > 65535:
        parser.error("--port must be in range 0..65535")
    if args.record_interval < 0:
        parser.error("--record-interval must be >= 0")
    return args


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(list(sys.argv[1:] if argv is None else argv))

    from netledger.core.logging import setup_logging
    from netledger.main import create_app

    setup_logging(args.log_level)
    fastapi_app = create_app(db_path=args.db, record_interval_seconds=args.record_interval)

    listen_sock, chosen_port = _bind_listen_socket(args.host, args.port)
    print(f"Server is running on http://{args.host}:{chosen_port}", flush=True)

    config = uvicorn.Config(
        fastapi_app,
        host=args.host,
        port=chosen_port,
        log_level=args.log_level.lower(),
        access_log=False,
    )
    server = uvicorn.Server(config)

    def _handle_term(*_args: object) -> None:
        server.should_exit = True

    signal.signal(signal.SIGTERM, _handle_term)
    signal.signal(signal.SIGINT, _handle_term)

    try:
        asyncio.run(server.serve(sockets=[listen_sock]))
    finally:
        listen_sock.close()


if __name__ == "__main__":
    try:
        main()
    except SystemExit:
        raise
    except Exception:
        traceback.print_exc(file=sys.stderr)
        raise SystemExit(1)
