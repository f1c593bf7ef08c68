import uvicorn

from standings.core.config import settings
from standings.utils.logging import setup_logging

if __name__ == "__main__":
    setup_logging("standings.log")
    uvicorn.run(
        "standings.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_dev,
        log_config=None,
        log_level=None,
    )
