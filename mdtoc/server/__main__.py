"""Server module entry point for running with python -m mdtoc.server."""

import logging
import os

import uvicorn

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logging.basicConfig(level=logging.INFO)
    logger.info("Starting mdtoc server", extra={"host": host, "port": port})

    uvicorn.run("mdtoc.server.api:app", host=host, port=port, reload=reload)
