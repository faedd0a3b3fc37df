"""FastAPI application entry point"""

from fastapi import FastAPI
from .core.config import settings
from .core.logging_config import configure_logging
from .api.v1.endpoints import agents, ingress

configure_logging(settings.log_level)

# Create FastAPI app
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="""
    Traffic Manager Intercept Helpers
    
    Decision helpers used by the traffic manager before intercepting a workload
    and when advertising how a cluster is reached from outside.
    
    ## Endpoints
    
    1. **Agent compatibility** - POST /v1/agents/compatibility
    2. **Resolve ingress for given services** - POST /v1/ingress/resolve
    3. **Detect ingress from the cluster** - GET /v1/ingress
    """,
    debug=settings.debug
)

# Include routers
app.include_router(agents.router, prefix=settings.api_prefix)
app.include_router(ingress.router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.api_title,
        "version": settings.api_version,
        "status": "operational",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.api_title
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "traffic_manager.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
