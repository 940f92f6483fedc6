"""Vertex layout description and abstract GPU buffers."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional


class ShaderDataType(Enum):
    """Data types a shader attribute may have."""

    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11


_SIZES = {
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 8,
    ShaderDataType.FLOAT3: 12,
    ShaderDataType.FLOAT4: 16,
    ShaderDataType.MAT3: 36,
    ShaderDataType.MAT4: 64,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 8,
    ShaderDataType.INT3: 12,
    ShaderDataType.INT4: 16,
    ShaderDataType.BOOL: 1,
}

_COMPONENTS = {
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 9,
    ShaderDataType.MAT4: 16,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.BOOL: 1,
}


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Size in bytes of one value of ``data_type``."""
    try:
        return _SIZES[data_type]
    except KeyError:
        raise ValueError(f"Unknown ShaderDataType: {data_type!r}") from None


@dataclass
class BufferElement:
    """One attribute in a vertex layout."""

    name: str
    data_type: ShaderDataType
    normalized: bool = False
    size: int = field(init=False)
    offset: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.size = shader_data_type_size(self.data_type)

    def component_count(self) -> int:
        try:
            return _COMPONENTS[self.data_type]
        except KeyError:
            raise ValueError(f"Unknown ShaderDataType: {self.data_type!r}") from None


class BufferElementsLayout:
    """Ordered attributes of a vertex, with their byte offsets and the stride."""

    def __init__(self, elements: Iterable[BufferElement] = ()) -> None:
        self._elements: list[BufferElement] = []
        offset = 0
        for element in elements:
            placed = dataclasses.replace(element)
            placed.offset = offset
            offset += placed.size
            self._elements.append(placed)
        self._stride = offset

    @property
    def stride(self) -> int:
        return self._stride

    @property
    def elements(self) -> tuple[BufferElement, ...]:
        return tuple(self._elements)

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)


class VertexBuffer(ABC):
    """A buffer of vertex data described by a layout."""

    def __init__(self) -> None:
        self.layout: Optional[BufferElementsLayout] = None

    @abstractmethod
    def bind(self) -> None: ...

    @abstractmethod
    def unbind(self) -> None: ...


class IndexBuffer(ABC):
    """A buffer of vertex indices."""

    @abstractmethod
    def bind(self) -> None: ...

    @abstractmethod
    def unbind(self) -> None: ...

    @property
    @abstractmethod
    def count(self) -> int: ...