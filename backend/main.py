import logging

import uvicorn

from backend.app import create_app
from backend.config import settings

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Create FastAPI application
app = create_app(settings)


def main():
    print("🚀 Starting LUMA Server...")
    print(f"📍 Server: http://localhost:{settings.SERVICE_PORT}")
    print(f"📁 Data stored in: {settings.DATA_DIR}")
    print("🛑 Press CTRL+C to stop\n")

    uvicorn.run(
        app,
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
