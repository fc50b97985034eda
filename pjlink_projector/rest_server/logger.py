#!/usr/bin/env python3

# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
A REST FastAPI server that controls a PJLink projector.
"""

from __future__ import annotations

import logging

logger = logging.getLogger('pjlink_projector.rest_server')
