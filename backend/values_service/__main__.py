"""Run the Values API under uvicorn: python -m values_service."""

import uvicorn

from values_service.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "values_service.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
