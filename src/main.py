from fastapi import FastAPI

from src.apps.api import router
from src.config.settings import get_settings

settings = get_settings()

# --- Application setup ---

app = FastAPI(
    title="Batch Rename API",
    version="0.1.0",
    description="Local API for listing a directory and renaming its files in batch",
)

app.include_router(router.router, prefix="/api")


@app.get("/health")
async def health_check():
    """
    Simple health check endpoint to confirm the API is running.
    """
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    print(f"Starting Batch Rename API on {settings.API_HOST}:{settings.API_PORT}")

    # Only enable reload in debug mode
    uvicorn.run(
        "src.main:app" if settings.DEBUG else app,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
