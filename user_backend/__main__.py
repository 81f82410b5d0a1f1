"""Run the API with uvicorn: ``python -m user_backend``."""

# External package imports
import uvicorn

# Local application imports
from .main import app
from .core.config import get_settings


def main() -> None:
    # Imported after main so values from .env are already loaded
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
