import logging
from pprint import pprint
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reqdump.config import ConfigurationService, setup_config
from reqdump.config.log import configure_structlog
from reqdump.config.models import ConfigModel
from reqdump.middlewares.request_context import RequestContextMiddleware
from reqdump.middlewares.request_dump import RequestDumpMiddleware
from reqdump.routers.dump import router as dump_router
from reqdump.routers.health import router as health_router


def create_app(config: Optional[ConfigModel] = None) -> FastAPI:
    """Application factory for creating FastAPI instances.

    Args:
        config: Optional configuration. If None, loads it from the config files.

    Returns:
        Configured FastAPI application instance.
    """
    if config is None:
        setup_config()
        config_service = ConfigurationService()
        config = config_service.get_config()
    else:
        config_service = ConfigurationService(config=config)

    configure_structlog(config)

    app = FastAPI(title='reqdump', version='0.1.0')
    app.state.config = config
    app.state.config_service = config_service

    for k in logging.root.manager.loggerDict.keys():
        if any(k.startswith(v) for v in {'fastapi', 'uvicorn', 'httpx', 'httpcore'}):
            logging.getLogger(k).setLevel('INFO')

    app.include_router(health_router, prefix='/api', tags=['health'])
    app.include_router(dump_router)

    # Add middlewares (executed LIFO); the dump runs inside the request context
    app.add_middleware(RequestDumpMiddleware, config=config.dump)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins,
        allow_credentials=True,
        allow_methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS'],
        allow_headers=['*'],
    )
    app.add_middleware(RequestContextMiddleware)

    if config.dev:
        pprint(config.model_dump())

    return app


if __name__ == '__main__':
    import uvicorn

    app = create_app()
    config = app.state.config

    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
    )
