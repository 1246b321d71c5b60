"""
main.py
-------
Entry point for the MedCard gRPC service.

Responsibilities:
    - Initialize the database engine and schema.
    - Build the gRPC server and register the MedCard and MedWorkers servicers.
    - Serve until interrupted, then shut down gracefully.
"""

import signal
from concurrent import futures
from typing import Optional

import grpc

from config import DB_AUTO_MIGRATE, GRPC_GRACE_SECONDS, GRPC_HOST, GRPC_MAX_WORKERS, GRPC_PORT
from db.connection import close_engine, init_engine
from db.init_db import create_tables
from handlers.card_handler import CardServicer
from handlers.medworker_handler import MedWorkerServicer
from protos import medcard_pb2_grpc
from utils.logger import get_logger

logger = get_logger(__name__)


def init_database() -> None:
    """Connect to the database and create missing tables when DB_AUTO_MIGRATE is on."""
    init_engine()
    if DB_AUTO_MIGRATE:
        create_tables()
    else:
        logger.info("DB_AUTO_MIGRATE is off, leaving the schema as it is.")


def build_server(address: Optional[str] = None) -> tuple[grpc.Server, int]:
    """
    Create a gRPC server with every servicer registered.

    Args:
        address: host:port to listen on (default GRPC_HOST:GRPC_PORT).
            Port 0 picks a free port.

    Returns:
        (server, bound_port). The server is not started yet.
    """
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=GRPC_MAX_WORKERS))
    medcard_pb2_grpc.add_MedCardServicer_to_server(CardServicer(), server)
    medcard_pb2_grpc.add_MedWorkersServicer_to_server(MedWorkerServicer(), server)
    port = server.add_insecure_port(address or f"{GRPC_HOST}:{GRPC_PORT}")
    return server, port


def main() -> None:
    """Initialize and run the service."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_database()

    # ── 2. Build and start the gRPC server ────────────────
    server, port = build_server()
    server.start()
    logger.info(f"MedCard service listening on {GRPC_HOST}:{port} ({GRPC_MAX_WORKERS} workers)")

    # ── 3. Graceful shutdown on SIGTERM / Ctrl+C ──────────
    def _shutdown(signum, frame):
        logger.info(f"Received signal {signum}, stopping server...")
        server.stop(GRPC_GRACE_SECONDS)

    signal.signal(signal.SIGTERM, _shutdown)
    signal.signal(signal.SIGINT, _shutdown)

    server.wait_for_termination()

    # ── 4. Cleanup on shutdown ────────────────────────────
    close_engine()
    logger.info("MedCard service stopped.")


if __name__ == "__main__":
    main()
