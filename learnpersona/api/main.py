"""
Main Entry Point for LearnPersona API

Run the FastAPI application with uvicorn.
"""

import uvicorn

from learnpersona.config import get_settings


def run():
    settings = get_settings()
    # Use import string to enable reload
    uvicorn.run(
        "learnpersona.api.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    run()
