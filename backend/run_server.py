"""
Start the KLineChart API with uvicorn.

Host, port, reload and log level come from the environment or backend/.env.
"""
import sys
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parent
sys.path.insert(0, str(BACKEND_DIR))

from dotenv import load_dotenv

load_dotenv(BACKEND_DIR / ".env")

import uvicorn

from klinechart.core.config import settings


def main():
    print(f"{settings.app_name} on http://{settings.host}:{settings.port} (docs at /docs)")
    uvicorn.run(
        "klinechart.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        reload_dirs=[str(BACKEND_DIR)] if settings.debug else None,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
