"""
FastAPI application initialization for the parametric insurance protocol.
"""
import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import LOG_LEVEL
from app.dependencies import get_protocol
from app.routes.claims import router as claims_router
from app.routes.oracle import router as oracle_router
from app.routes.policies import router as policies_router
from app.services.protocol import Protocol


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


# Initialize FastAPI app
app = FastAPI(
    title="Parametric Insurance Protocol API",
    description="Policies, oracle feeds and automatically adjudicated claims",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(policies_router)
app.include_router(oracle_router)
app.include_router(claims_router)


@app.get("/health")
def health(protocol: Protocol = Depends(get_protocol)):
    """
    Application health check endpoint.
    """
    return {
        "status": "healthy",
        "service": "parametric_insurance",
        "policies_count": len(protocol.policies),
        "oracle_feeds_count": len(protocol.oracle),
        "claims_count": len(protocol.claims),
    }
