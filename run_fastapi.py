"""
Main entry point for the FastAPI application.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn farmer_network.main:app --host 0.0.0.0 --port 4000 --reload

Requires a generated Prisma client (`prisma generate`) and DATABASE_URL.
"""

import os
import sys
import io

# Set UTF-8 encoding for stdout/stderr to handle Unicode characters on Windows
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(
        sys.stdout.buffer, encoding="utf-8", errors="replace", line_buffering=True
    )
    sys.stderr = io.TextIOWrapper(
        sys.stderr.buffer, encoding="utf-8", errors="replace", line_buffering=True
    )

os.environ["PYTHONIOENCODING"] = "utf-8"

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from farmer_network.config.settings import get_config

if __name__ == "__main__":
    env = os.getenv("APP_ENV", "development")
    config = get_config(env)

    print(f"Starting Farmer Network API in {env} mode...")
    print(f"Server running on http://{config.HOST}:{config.PORT}")
    print(f"API docs available at http://{config.HOST}:{config.PORT}/docs")

    uvicorn.run(
        "farmer_network.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG,
        log_level="info" if config.DEBUG else "warning",
    )
