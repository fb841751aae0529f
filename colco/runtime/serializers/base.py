# Copyright (c) 2026 ColCo
# SPDX-License-Identifier: MIT

"""Base types for serializers."""

from enum import Enum


class SerializerFormat(Enum):
    """Output format for swatch serialization."""

    HEX = "hex"
    HEX_RGBA = "hex_rgba"
    CSS = "css"
    JSON = "json"
    JSON_PRETTY = "json_pretty"
