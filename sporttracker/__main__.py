"""Run the API server: python -m sporttracker"""

import os

import uvicorn

from sporttracker.api.app import create_app
from sporttracker.utilities.logging import setup_logging


def main() -> None:
    setup_logging()
    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run(create_app(), host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
