#!/usr/bin/env python
"""Script to run the Tasks API server."""
import logging

import uvicorn

from app.config import HOST, LOG_LEVEL, PORT

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    logger.info("Server running on http://localhost:%s", PORT)
    uvicorn.run(
        "app.main:app",
        host=HOST,
        port=PORT,
    )
