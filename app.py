"""Labelarr entry point."""
import uvicorn

from labelarr.api.app import app
from labelarr.config import Config

if __name__ == "__main__":
    uvicorn.run(app, host=Config.API_HOST, port=Config.API_PORT)
