"""
Entry point for the Stargate astronaut duty tracker backend.
"""
import uvicorn
from app.config import get_settings


def main():
    """Run the FastAPI application."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level
    )


if __name__ == "__main__":
    main()
