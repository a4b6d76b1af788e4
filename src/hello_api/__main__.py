"""Run the API with uvicorn: ``python -m hello_api``."""
import uvicorn

from hello_api.app import app
from hello_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
