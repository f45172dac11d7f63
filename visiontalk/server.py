"""FastAPI server entry point for VisionTalk."""

import uvicorn

from .config import get_settings


def main():
    """Run the FastAPI server."""
    settings = get_settings()

    uvicorn.run(
        "visiontalk.app:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level="info"
    )


if __name__ == "__main__":
    main()
