"""Run the wiki with uvicorn: ``python -m flatwiki``."""

import uvicorn

from flatwiki.config import settings


def main() -> None:
    uvicorn.run(
        "flatwiki.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
