#!/usr/bin/env python3
"""Run the FastAPI server directly with auto-reload."""

import uvicorn

from visiontalk.config import get_settings


def main():
    """Run the FastAPI server."""
    settings = get_settings()

    uvicorn.run(
        "visiontalk.app:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=True,
        log_level="info"
    )


if __name__ == "__main__":
    main()
