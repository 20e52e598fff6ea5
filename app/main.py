"""
Main FastAPI application entry point.

Following kkb_fastapi pattern. The environment is picked with ENVIRONMENT
(development, production or test).
"""
import logging
import os

import uvicorn

from app.create_app import get_app

logging.basicConfig(level=logging.DEBUG)

app = get_app(f"{os.environ.get('ENVIRONMENT', 'development')}.toml")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "ESG Emissions Terminal API",
        "version": app.version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    store = app.state.record_store
    return {
        "status": "healthy",
        "service": "esg-emissions-terminal",
        "facilities": len(store.facilities),
        "records": len(store.records),
    }


if __name__ == "__main__":
    try:
        uvicorn.run(
            app,
            host="0.0.0.0",
            port=int(os.environ.get("PORT", 8000)),
            log_level="debug",
            loop="asyncio",
        )
    except Exception as e:
        logging.error(f"Error running FastAPI: {e}")
