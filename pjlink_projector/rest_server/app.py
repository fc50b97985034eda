#!/usr/bin/env python3

# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
A REST FastAPI server that controls a PJLink projector.

The projector is configured from a JSON file named by the PJLINK_PROJECTOR_CONFIG
environment variable (or pjlink_projector_config.json in the current directory),
falling back to the PJLINK_PROJECTOR_* environment variables.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

import time
import os
import json

from contextlib import asynccontextmanager

from .logger import logger
from ..internal_types import *
from ..constants import ENV_CONFIG, DEFAULT_CONFIG_FILENAME
from ..exceptions import (
    PjlinkProjectorError,
    PjlinkTransportError,
    PjlinkProtocolError,
    PjlinkAuthError,
    PjlinkDeviceError,
  )
from ..client import PjlinkProjectorClient, PjlinkProjectorClientConfig
from ..util import full_class_name

from .api import router as api_router

@asynccontextmanager
async def fastapi_lifetime(app: FastAPI) -> AsyncIterator[None]:
    """
    A context manager that initializes and cleans up for FastAPI.
    """

    try:
        logger.info("Projector REST server starting up--initializing...")
        config_file = os.environ.get(ENV_CONFIG, None)
        if config_file is None:
            if os.path.exists(DEFAULT_CONFIG_FILENAME):
                config_file = DEFAULT_CONFIG_FILENAME
        if config_file is None:
            raw_config: JsonableDict = {}
        else:
            with open(config_file, "r") as f:
                raw_config = json.load(f)
        pjlink_config = PjlinkProjectorClientConfig.from_jsonable(raw_config)
        app.state.pjlink_config = pjlink_config
        app.state.launch_time = time.monotonic()
        pjlink_client = PjlinkProjectorClient(config=pjlink_config)
        app.state.pjlink_client = pjlink_client
        logger.info(f"Serving API for projector at {pjlink_client}...")

        logger.info("Projector REST server initialization done; starting server...")
        yield
    finally:
        logger.info("Projector REST server shutting down--cleaning up...")

proj_api = FastAPI(lifespan=fastapi_lifetime)
proj_api.include_router(api_router)

def error_status_code(exc: PjlinkProjectorError) -> int:
    """Returns the HTTP status code used to report a PjlinkProjectorError"""
    if isinstance(exc, PjlinkDeviceError):
        return 409
    if isinstance(exc, PjlinkAuthError):
        return 401
    if isinstance(exc, PjlinkProtocolError):
        return 502
    if isinstance(exc, PjlinkTransportError):
        return 504
    return 400

@proj_api.exception_handler(PjlinkProjectorError)
async def pjlink_error_handler(request: Request, exc: PjlinkProjectorError) -> JSONResponse:
    status_code = error_status_code(exc)
    logger.warning(f"{request.method} {request.url.path} failed with {status_code}: {exc}")
    content: JsonableDict = dict(detail=str(exc), error=full_class_name(exc))
    if isinstance(exc, PjlinkDeviceError):
        content['kind'] = exc.kind.name
        content['code'] = exc.code
    return JSONResponse(status_code=status_code, content=content)

def get_projector_config() -> PjlinkProjectorClientConfig:
    return proj_api.state.pjlink_config
