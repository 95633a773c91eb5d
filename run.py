#!/usr/bin/env python3
"""
Run script for the VoxGuard backend
"""
import uvicorn

from voxguard.config.settings import settings
from voxguard.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, reload=settings.debug)
