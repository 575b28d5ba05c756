"""Run the API server: ``python -m mission_control``."""
import uvicorn

from mission_control.config import settings
from mission_control.logging_config import setup_logging


def main() -> None:
    setup_logging()
    uvicorn.run(
        "mission_control.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
