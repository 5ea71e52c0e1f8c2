"""
Run the credential store with uvicorn: ``python -m userstore``.
"""
import uvicorn

from userstore.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "userstore.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
