import uvicorn

from productization.core.config import settings


def main() -> None:
    uvicorn.run("productization.main:app", host=settings.app_host, port=settings.app_port)


if __name__ == "__main__":
    main()
