import uvicorn

from todoapi.config import settings


def main() -> None:
    uvicorn.run(
        "todoapi.main:create_app",
        factory=True,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
