"""Main FastAPI application entry point."""

from pathlib import Path

from dotenv import load_dotenv
from fastapi.responses import Response

from weather_widget.config import get_settings
from weather_widget.core.app_factory import create_app
from weather_widget.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

# Configure structured logging (JSON to file + console)
setup_logging(get_settings())

app = create_app()


@app.get("/favicon.ico", include_in_schema=False)
async def favicon():
    """Return empty favicon to prevent 404 errors."""
    return Response(content=b"", media_type="image/x-icon")


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "weather_widget.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
