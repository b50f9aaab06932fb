"""ASGI entry point: `uvicorn farmer_network.main:app`."""

from farmer_network.fastapi_app import create_fastapi_app

app = create_fastapi_app()
