"""Run the API in the foreground: ``python -m group_mailer``."""
import uvicorn

from group_mailer.core.config import settings


def main() -> None:
    uvicorn.run("group_mailer.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
