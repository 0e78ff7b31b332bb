"""Entry-point script – delegates to Uvicorn with the FastAPI app that lives
in the ``ddlforge.api`` package."""

import uvicorn

from ddlforge.config import config


if __name__ == "__main__":
    # For development, run uvicorn directly:
    # uvicorn ddlforge.api:app --reload --port 5001
    uvicorn.run(
        "ddlforge.api:app",
        host=config.get('api', {}).get('host', "127.0.0.1"),
        port=config.get('api', {}).get('port', 5001),
        reload=config.get('api', {}).get('debug', False),
    )
