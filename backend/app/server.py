"""Process Entry Point: runs the application under uvicorn.

Invariants:
    - Listens on settings.host:settings.port (PORT env, default 3000)
    - Logging left to setup_logging (uvicorn's own log config disabled)
    - SIGINT/SIGTERM handled by uvicorn: graceful shutdown runs the lifespan exit
"""

import uvicorn

from app.config import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
