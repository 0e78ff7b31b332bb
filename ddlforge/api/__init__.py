from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ddlforge import __version__
from ddlforge.config import config
from ddlforge.utils.logger import setup_logger

# Create the FastAPI instance
app = FastAPI(title="ddlforge DDL API", version=__version__)

# Allow cross-origin requests from any origin (browser editors call this directly)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


from .routes import api_router

app.include_router(api_router)

route_logger = setup_logger('routes')
for route in app.routes:
    if hasattr(route, 'methods'):
        route_logger.info(f"{sorted(route.methods)}  {route.path}")

route_logger.debug(f"API version prefix: {config.get('api', {}).get('version', 'v1')}")
