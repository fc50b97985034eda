#!/usr/bin/env python3

# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
REST API routes for the PJLink projector server.

Route handlers are plain (non-async) functions; FastAPI runs them in its
thread pool, since every projector operation is a blocking network exchange.
"""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from .logger import logger
from ..internal_types import *
from ..version import __version__ as pkg_version
from ..client import PjlinkProjectorClient
from ..protocol import (
    PowerStatus,
    InputType,
    InputSource,
    AvMute,
    Lamp,
    ErrorStatus,
  )

router = APIRouter(prefix="/v1")

class InputRequest(BaseModel):
    input_type: str
    channel: int

class AvMuteRequest(BaseModel):
    video: bool
    audio: bool

def get_client(request: Request) -> PjlinkProjectorClient:
    return request.app.state.pjlink_client

def power_to_jsonable(status: PowerStatus) -> JsonableDict:
    return dict(power=status.name)

def input_to_jsonable(source: InputSource) -> JsonableDict:
    return dict(input_type=source.input_type.name, channel=source.channel)

def avmute_to_jsonable(mute: AvMute) -> JsonableDict:
    return dict(video=mute.video, audio=mute.audio)

def lamp_to_jsonable(lamp: Lamp) -> JsonableDict:
    return dict(hours=lamp.hours, on=lamp.on)

def error_status_to_jsonable(status: ErrorStatus) -> JsonableDict:
    result: JsonableDict = dict((k, v.name) for k, v in status.as_dict().items())
    result['has_error'] = status.has_error
    return result

@router.get("/server")
def get_server_info(request: Request) -> Dict[str, Any]:
    return dict(
        version=pkg_version,
        uptime_secs=time.monotonic() - request.app.state.launch_time,
      )

@router.get("/power")
def get_power(client: PjlinkProjectorClient = Depends(get_client)) -> Dict[str, Any]:
    return power_to_jsonable(client.get_power_status())

@router.post("/power/on")
def power_on(client: PjlinkProjectorClient = Depends(get_client)) -> Dict[str, Any]:
    logger.info("Turning projector on")
    return power_to_jsonable(client.power_on())

@router.post("/power/off")
def power_off(client: PjlinkProjectorClient = Depends(get_client)) -> Dict[str, Any]:
    logger.info("Turning projector off")
    return power_to_jsonable(client.power_off())

@router.get("/input")
def get_input(client: PjlinkProjectorClient = Depends(get_client)) -> Dict[str, Any]:
    return input_to_jsonable(client.get_input())

@router.put("/input")
def set_input(body: InputRequest, client: PjlinkProjectorClient = Depends(get_client)) -> Dict[str, Any]:
    try:
        input_type = InputType[body.input_type.upper()]
    except KeyError:
        raise HTTPException(status_code=422, detail=f"Unknown input type: {body.input_type!r}")
    logger.info(f"Selecting input {input_type.name} {body.channel}")
    return input_to_jsonable(client.set_input(InputSource(input_type, body.channel)))

@router.get("/inputs")
def get_inputs(client: PjlinkProjectorClient = Depends(get_client)) -> Dict[str, Any]:
    return dict(inputs=[input_to_jsonable(source) for source in client.get_input_list()])

@router.get("/avmute")
def get_avmute(client: PjlinkProjectorClient = Depends(get_client)) -> Dict[str, Any]:
    return avmute_to_jsonable(client.get_avmute())

@router.put("/avmute")
def set_avmute(body: AvMuteRequest, client: PjlinkProjectorClient = Depends(get_client)) -> Dict[str, Any]:
    return avmute_to_jsonable(client.set_avmute(AvMute(video=body.video, audio=body.audio)))

@router.get("/lamps")
def get_lamps(client: PjlinkProjectorClient = Depends(get_client)) -> Dict[str, Any]:
    return dict(lamps=[lamp_to_jsonable(lamp) for lamp in client.get_lamp()])

@router.get("/errors")
def get_errors(client: PjlinkProjectorClient = Depends(get_client)) -> Dict[str, Any]:
    return error_status_to_jsonable(client.get_error_status())

@router.get("/info")
def get_info(client: PjlinkProjectorClient = Depends(get_client)) -> Dict[str, Any]:
    return dict(
        name=client.get_device_name(),
        manufacturer=client.get_manufacturer(),
        product_name=client.get_product_name(),
        info=client.get_info(),
        pjlink_class=client.get_class(),
      )
