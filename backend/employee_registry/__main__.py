"""Run the API with uvicorn: python -m employee_registry."""

import uvicorn

from employee_registry.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "employee_registry.main:app",
        host=settings.host,
        port=settings.port,
        access_log=False,
    )


if __name__ == "__main__":
    main()
