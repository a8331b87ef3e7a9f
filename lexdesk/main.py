"""
LexDesk - Main Entry Point
"""

import uvicorn

from lexdesk.app import create_app
from lexdesk.core.config import settings

app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "lexdesk.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        workers=1 if settings.DEBUG else settings.WORKERS,
    )
