"""
Node startup script for the StarChain API
"""

import argparse

import uvicorn

from .api.server import create_app
from .config.env import API_HOST, API_PORT, LOG_DIR, LOG_LEVEL
from .config.logging_config import get_component_logger, setup_logging
from .core.blockchain import initialize_ledger


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a StarChain registry node")
    parser.add_argument("--host", default=API_HOST, help="Interface to bind the API to")
    parser.add_argument("--port", type=int, default=API_PORT, help="API port")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument("--log-dir", default=LOG_DIR, help="Directory for log files; empty for console only")
    parser.add_argument("--node-id", default=None, help="Node identifier used in log file names")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(log_dir=args.log_dir or None, log_level=args.log_level, node_id=args.node_id)
    logger = get_component_logger("node", node_id=args.node_id)

    ledger = initialize_ledger()
    logger.info(f"Ledger ready at height {ledger.get_height()}")

    app = create_app(ledger)
    logger.info(f"Starting API on {args.host}:{args.port}")
    try:
        uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    main()
