"""
Start the recommendation server.

Usage:
    python -m shoprec.run
"""
import logging
import os

import uvicorn

from shoprec.env import load_env


def main() -> None:
    load_env()
    log_level = os.getenv("SHOPREC_LOG_LEVEL", "INFO")

    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    host = os.getenv("SHOPREC_HOST", "127.0.0.1")
    port = int(os.getenv("SHOPREC_PORT", "9001"))

    uvicorn.run(
        "shoprec.app:app",
        host=host,
        port=port,
        log_level=log_level.lower(),
    )


if __name__ == "__main__":
    main()
