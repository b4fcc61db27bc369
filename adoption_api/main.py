"""
Production ASGI entry point.

    uvicorn adoption_api.main:app --host 0.0.0.0 --port 5001
"""

from adoption_api.config.logging_config import setup_logging
from adoption_api.config.settings import Config
from adoption_api.fastapi_app import create_fastapi_app
from adoption_api.setup.ioc.container import create_container

setup_logging(Config.LOG_LEVEL, Config.LOG_PATH or None)

# Container is created before the app starts: Dishka adds middleware
container = create_container()
app = create_fastapi_app(container)
