import uvicorn

from dverbs.config import settings

# --- Run Application ---
if __name__ == "__main__":
    uvicorn.run(
        "dverbs.app:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
