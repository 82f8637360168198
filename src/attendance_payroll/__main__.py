"""Entry point for running the application with uvicorn."""

import logging

import uvicorn

from attendance_payroll.config import get_settings


def main() -> None:
    """Run the application."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "attendance_payroll.api.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
