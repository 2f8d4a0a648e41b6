#!/usr/bin/env python3
"""Run script for tourdesk."""

import os

import uvicorn

from tourdesk.config import get_settings

if __name__ == "__main__":
    uvicorn.run(
        "tourdesk.api.app:app",
        host="0.0.0.0",
        port=get_settings().port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
        reload=os.getenv("DEBUG", "False").lower() == "true",
    )
