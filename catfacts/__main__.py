import logging

import uvicorn

from .config import load_settings


def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # factory: the app (and its HttpFactService) is built inside the server process
    uvicorn.run("catfacts.main:create_app", factory=True, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
