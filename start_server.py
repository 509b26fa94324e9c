#!/usr/bin/env python3
"""
Start the Flood Monitoring Ledger server.
"""
import uvicorn

from flood_ledger.core.config import settings


def start_server():
    """Start the server."""
    print("Starting Flood Monitoring Ledger API...")
    if settings.debug:
        print(
            f"Swagger UI will be available at: http://localhost:8000{settings.api_prefix}/docs"
        )
    print(f"Initial block height: {settings.initial_block_height}")

    uvicorn.run(
        "flood_ledger.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    start_server()
