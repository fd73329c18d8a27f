#!/usr/bin/env python
"""
Run the Task List API server.

Usage:
    python run_api.py
    python run_api.py --reload  # Development mode
"""

import argparse
import uvicorn

from shared.config import get_settings
from shared.logging_setup import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Run Task List API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level)

    # On SIGINT/SIGTERM uvicorn stops accepting connections and waits for
    # in-flight requests, at most shutdown_timeout seconds.
    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        timeout_graceful_shutdown=settings.shutdown_timeout,
        log_config=None,
    )


if __name__ == "__main__":
    main()
