"""odf-datapackage API - read-only datapackage query service.

Serves resolved entities from datapackages registered in memory:
- Views and resources by name
- Algorithm input resources
- Display panes with tabs and views resolved
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from odf_datapackage import __version__, config
from odf_datapackage.api.routes import datapackages
from odf_datapackage.datapackage.registry import get_datapackage_registry

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# Create FastAPI app
app = FastAPI(
    title="odf-datapackage API",
    description="""
## Datapackage query service

Resolves the name references inside registered datapackages.

### Key Endpoints

- `GET /v1/datapackages` - List registered datapackages
- `GET /v1/datapackages/{key}/views?names=...` - Views in request order
- `GET /v1/datapackages/{key}/displays/{name}/panes` - Resolved display panes
- `GET /v1/datapackages/{key}/algorithms/{name}/inputs/{input}/resource` - Input resource
""",
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(datapackages.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "odf-datapackage API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "datapackages": "/v1/datapackages",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    registry = get_datapackage_registry()
    return {
        "status": "healthy",
        "datapackages_loaded": registry.count(),
        "lookup_strategy": config.LOOKUP_STRATEGY,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "odf_datapackage.api.main:app",
        host=config.API_HOST,
        port=config.API_PORT,
        reload=True,
    )
