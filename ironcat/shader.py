"""Shader stages, multi-stage source splitting and the shader interface."""

from __future__ import annotations

import os
import re
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Optional, Union

TYPE_TOKEN = "#type"

_EOL = re.compile(r"[\r\n]")
_NOT_EOL = re.compile(r"[^\r\n]")


class ShaderStage(IntEnum):
    """Shader stages, valued as their graphics-API enumerants."""

    FRAGMENT = 0x8B30
    VERTEX = 0x8B31


_STAGE_NAMES = {"vertex": ShaderStage.VERTEX, "fragment": ShaderStage.FRAGMENT}


def shader_stage_from_string(name: str) -> Optional[ShaderStage]:
    """Return the stage called ``name``, or None if there is none."""
    return _STAGE_NAMES.get(name)


def preprocess_shader_source(source: str) -> dict[ShaderStage, str]:
    """Split a file of ``#type <stage>`` sections into code per stage."""
    code: dict[ShaderStage, str] = {}
    pos = source.find(TYPE_TOKEN)
    while pos != -1:
        eol_match = _EOL.search(source, pos)
        if eol_match is None:
            raise ValueError("Syntax error: shader type line has no end")
        eol = eol_match.start()
        type_name = source[pos + len(TYPE_TOKEN) + 1 : eol]
        stage = shader_stage_from_string(type_name)
        if stage is None:
            raise ValueError(f"Invalid shader type specified: {type_name!r}")

        code_match = _NOT_EOL.search(source, eol)
        if code_match is None:
            raise ValueError("Syntax error: shader type has no code")
        start = code_match.start()
        pos = source.find(TYPE_TOKEN, start)
        code[stage] = source[start:] if pos == -1 else source[start:pos]
    return code


def read_shader_file(path: Union[str, os.PathLike]) -> str:
    """Return the whole text of a shader file."""
    with open(path, encoding="utf-8") as stream:
        return stream.read()


class Shader(ABC):
    """A compiled shader program."""

    @abstractmethod
    def bind(self) -> None: ...

    @abstractmethod
    def unbind(self) -> None: ...