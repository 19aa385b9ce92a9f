"""Graphics descriptions and their translation into OpenGL enumerations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag, auto
from typing import Any, Iterable, Optional, Sequence

__all__ = [
    "GfxStates",
    "CompareFunc",
    "Operation",
    "BlendMode",
    "CullOrder",
    "CullMode",
    "BufferType",
    "BufferUsage",
    "DrawMode",
    "LayoutType",
    "TextureFormat",
    "TextureFilter",
    "TextureWrap",
    "TextureType",
    "ContextFlags",
    "ShaderType",
    "DepthDesc",
    "StencilDesc",
    "BlendDesc",
    "CullDesc",
    "LayoutDesc",
    "AttribFormat",
    "BufferDesc",
    "TextureDesc",
    "CubemapDesc",
    "gl_compare_func",
    "gl_operation",
    "gl_blend_mode",
    "gl_cull_order",
    "gl_cull_mode",
    "gl_buffer_type",
    "gl_buffer_usage",
    "gl_draw_mode",
    "gl_error_source",
    "gl_error_type",
    "layout_size",
    "layout_component_type",
    "layout_component_count",
    "semantic_count",
    "semantic_size",
    "is_semantic",
    "calc_stride",
    "attribute_formats",
    "texture_gl_format",
    "texture_gl_filter",
    "texture_gl_wrap",
    "clear_bits_for",
    "TEXTURES_MAX",
    "CUBEMAPS_MAX",
    "GL_MINIMUM_MAJOR_VERSION",
    "GL_MINIMUM_MINOR_VERSION",
    "STATE_CAPABILITIES",
]

# OpenGL enumeration values.
GL_ZERO = 0x0000
GL_ONE = 0x0001

GL_POINTS = 0x0000
GL_LINES = 0x0001
GL_LINE_STRIP = 0x0003
GL_TRIANGLES = 0x0004
GL_TRIANGLE_STRIP = 0x0005

GL_NEVER = 0x0200
GL_LESS = 0x0201
GL_EQUAL = 0x0202
GL_LEQUAL = 0x0203
GL_GREATER = 0x0204
GL_NOTEQUAL = 0x0205
GL_GEQUAL = 0x0206
GL_ALWAYS = 0x0207

GL_SRC_COLOR = 0x0300
GL_ONE_MINUS_SRC_COLOR = 0x0301
GL_SRC_ALPHA = 0x0302
GL_ONE_MINUS_SRC_ALPHA = 0x0303
GL_DST_ALPHA = 0x0304
GL_ONE_MINUS_DST_ALPHA = 0x0305
GL_DST_COLOR = 0x0306
GL_ONE_MINUS_DST_COLOR = 0x0307
GL_SRC_ALPHA_SATURATE = 0x0308

GL_FRONT = 0x0404
GL_BACK = 0x0405
GL_FRONT_AND_BACK = 0x0408

GL_CW = 0x0900
GL_CCW = 0x0901

GL_CULL_FACE = 0x0B44
GL_DEPTH_TEST = 0x0B71
GL_STENCIL_TEST = 0x0B90
GL_BLEND = 0x0BE2
GL_MULTISAMPLE = 0x809D

GL_KEEP = 0x1E00
GL_REPLACE = 0x1E01
GL_INCR = 0x1E02
GL_DECR = 0x1E03
GL_INVERT = 0x150A
GL_INCR_WRAP = 0x8507
GL_DECR_WRAP = 0x8508

GL_UNSIGNED_BYTE = 0x1401
GL_UNSIGNED_SHORT = 0x1403
GL_INT = 0x1404
GL_UNSIGNED_INT = 0x1405
GL_FLOAT = 0x1406
GL_UNSIGNED_INT_24_8 = 0x84FA

GL_RED = 0x1903
GL_RGBA = 0x1908
GL_RG = 0x8227
GL_R8 = 0x8229
GL_R16 = 0x822A
GL_RG8 = 0x822B
GL_RG16 = 0x822C
GL_RGBA8 = 0x8058
GL_RGBA16 = 0x805B
GL_DEPTH_STENCIL = 0x84F9
GL_DEPTH24_STENCIL8 = 0x88F0

GL_NEAREST = 0x2600
GL_LINEAR = 0x2601
GL_LINEAR_MIPMAP_LINEAR = 0x2703

GL_REPEAT = 0x2901
GL_CLAMP_TO_BORDER = 0x812D
GL_CLAMP_TO_EDGE = 0x812F
GL_MIRRORED_REPEAT = 0x8370

GL_TEXTURE_1D = 0x0DE0
GL_TEXTURE_2D = 0x0DE1
GL_TEXTURE_3D = 0x806F
GL_TEXTURE_CUBE_MAP = 0x8513

GL_ARRAY_BUFFER = 0x8892
GL_ELEMENT_ARRAY_BUFFER = 0x8893
GL_UNIFORM_BUFFER = 0x8A11

GL_STATIC_DRAW = 0x88E4
GL_STATIC_READ = 0x88E5
GL_DYNAMIC_DRAW = 0x88E8
GL_DYNAMIC_READ = 0x88E9

GL_DEPTH_BUFFER_BIT = 0x00000100
GL_STENCIL_BUFFER_BIT = 0x00000400
GL_COLOR_BUFFER_BIT = 0x00004000

GL_VERTEX_SHADER = 0x8B31
GL_FRAGMENT_SHADER = 0x8B30

GL_DEBUG_SOURCE_API = 0x8246
GL_DEBUG_SOURCE_WINDOW_SYSTEM = 0x8247
GL_DEBUG_SOURCE_SHADER_COMPILER = 0x8248
GL_DEBUG_SOURCE_THIRD_PARTY = 0x8249
GL_DEBUG_SOURCE_APPLICATION = 0x824A
GL_DEBUG_SOURCE_OTHER = 0x824B

GL_DEBUG_TYPE_ERROR = 0x824C
GL_DEBUG_TYPE_DEPRECATED_BEHAVIOR = 0x824D
GL_DEBUG_TYPE_UNDEFINED_BEHAVIOR = 0x824E
GL_DEBUG_TYPE_PORTABILITY = 0x824F
GL_DEBUG_TYPE_PERFORMANCE = 0x8250
GL_DEBUG_TYPE_OTHER = 0x8251

GL_DEBUG_SEVERITY_HIGH = 0x9146
GL_DEBUG_SEVERITY_MEDIUM = 0x9147
GL_DEBUG_SEVERITY_LOW = 0x9148
GL_DEBUG_SEVERITY_NOTIFICATION = 0x826B

TEXTURES_MAX = 32
CUBEMAPS_MAX = 5

GL_MINIMUM_MAJOR_VERSION = 4
GL_MINIMUM_MINOR_VERSION = 2

_F32 = 4
_I32 = 4
_U32 = 4


class GfxStates(IntFlag):
    """Pipeline states that can be switched on and off."""

    DEPTH = 1 << 0
    STENCIL = 1 << 1
    BLEND = 1 << 2
    MSAA = 1 << 3
    CULL = 1 << 4


STATE_CAPABILITIES = {
    GfxStates.DEPTH: GL_DEPTH_TEST,
    GfxStates.STENCIL: GL_STENCIL_TEST,
    GfxStates.BLEND: GL_BLEND,
    GfxStates.MSAA: GL_MULTISAMPLE,
    GfxStates.CULL: GL_CULL_FACE,
}


class CompareFunc(Enum):
    ALWAYS = auto()
    NEVER = auto()
    LESS = auto()
    LESS_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    NOT_EQUAL = auto()


class Operation(Enum):
    KEEP = auto()
    ZERO = auto()
    INVERT = auto()
    REPLACE = auto()
    INCR = auto()
    DECR = auto()
    INCR_WRAP = auto()
    DECR_WRAP = auto()


class BlendMode(Enum):
    ZERO = auto()
    ONE = auto()
    SRC_COLOR = auto()
    DEST_COLOR = auto()
    SRC_ALPHA = auto()
    DEST_ALPHA = auto()
    INV_SRC_COLOR = auto()
    INV_DEST_COLOR = auto()
    INV_SRC_ALPHA = auto()
    INV_DEST_ALPHA = auto()
    SRC_ALPHA_SATURATE = auto()


class CullOrder(Enum):
    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


class CullMode(Enum):
    FRONT = auto()
    BACK = auto()
    FRONT_AND_BACK = auto()


class BufferType(Enum):
    VERTEX = auto()
    INDEX = auto()
    UNIFORM = auto()


class BufferUsage(Enum):
    DYNAMIC_DRAW = auto()
    DYNAMIC_READ = auto()
    STATIC_DRAW = auto()
    STATIC_READ = auto()


class DrawMode(Enum):
    POINT = auto()
    TRIANGLE = auto()
    TRIANGLE_STRIP = auto()
    LINE = auto()
    LINE_STRIP = auto()


class LayoutType(Enum):
    FLOAT1 = auto()
    FLOAT2 = auto()
    FLOAT3 = auto()
    FLOAT4 = auto()
    INT1 = auto()
    INT2 = auto()
    INT3 = auto()
    INT4 = auto()
    UINT1 = auto()
    UINT2 = auto()
    UINT3 = auto()
    UINT4 = auto()
    MAT2 = auto()
    MAT3 = auto()
    MAT4 = auto()


class TextureFormat(Enum):
    R8 = auto()
    R16 = auto()
    RG8 = auto()
    RG16 = auto()
    RGBA8 = auto()
    RGBA16 = auto()
    DEPTH_STENCIL_24_8 = auto()


class TextureFilter(Enum):
    MIN_MAG_LINEAR = auto()
    MIN_MAG_NEAREST = auto()
    MIN_LINEAR_MAG_NEAREST = auto()
    MIN_NEAREST_MAG_LINEAR = auto()
    MIN_TRILINEAR_MAG_LINEAR = auto()
    MIN_TRILINEAR_MAG_NEAREST = auto()


class TextureWrap(Enum):
    REPEAT = auto()
    MIRROR = auto()
    CLAMP = auto()
    BORDER_COLOR = auto()


class TextureType(Enum):
    TEXTURE_1D = auto()
    TEXTURE_2D = auto()
    TEXTURE_3D = auto()
    RENDER_TARGET = auto()
    DEPTH_STENCIL_TARGET = auto()


class ContextFlags(IntFlag):
    """Options for clearing a frame; ``NONE`` clears nothing."""

    NONE = 1 << 0
    ENABLE_VSYNC = 1 << 1
    CUSTOM_RENDER_TARGET = 1 << 2
    CLEAR_COLOR_BUFFER = 1 << 3
    CLEAR_DEPTH_BUFFER = 1 << 4
    CLEAR_STENCIL_BUFFER = 1 << 5


class ShaderType(Enum):
    VERTEX = auto()
    FRAGMENT = auto()


@dataclass
class DepthDesc:
    compare_func: CompareFunc = CompareFunc.LESS
    depth_write_enabled: bool = True


@dataclass
class StencilDesc:
    polygon_face: CullMode = CullMode.FRONT_AND_BACK
    compare_func: CompareFunc = CompareFunc.ALWAYS
    stencil_fail_op: Operation = Operation.KEEP
    depth_fail_op: Operation = Operation.KEEP
    depth_pass_op: Operation = Operation.KEEP
    ref: int = 0
    mask: int = 0xFF


@dataclass
class BlendDesc:
    src_color_blend: BlendMode = BlendMode.SRC_ALPHA
    dest_color_blend: BlendMode = BlendMode.INV_SRC_ALPHA
    src_alpha_blend: BlendMode = BlendMode.ONE
    dest_alpha_blend: BlendMode = BlendMode.ZERO
    blend_factor: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)


@dataclass
class CullDesc:
    front_face: CullOrder = CullOrder.COUNTER_CLOCKWISE
    cull_mode: CullMode = CullMode.BACK


@dataclass(frozen=True)
class LayoutDesc:
    """One vertex attribute of a buffer layout."""

    type: LayoutType
    instance_rate: int = 0


@dataclass(frozen=True)
class AttribFormat:
    """Where and how one vertex attribute slot reads from the vertex buffer."""

    index: int
    component_count: int
    component_type: int
    offset: int
    instance_rate: int = 0


@dataclass
class BufferDesc:
    data: Optional[bytes] = None
    size: int = 0
    type: BufferType = BufferType.VERTEX
    usage: BufferUsage = BufferUsage.STATIC_DRAW


@dataclass
class TextureDesc:
    width: int = 0
    height: int = 0
    depth: int = 0
    mips: int = 1
    type: TextureType = TextureType.TEXTURE_2D
    format: TextureFormat = TextureFormat.RGBA8
    filter: TextureFilter = TextureFilter.MIN_MAG_LINEAR
    wrap_mode: TextureWrap = TextureWrap.REPEAT
    data: Optional[bytes] = None


@dataclass
class CubemapDesc:
    width: int = 0
    height: int = 0
    mips: int = 1
    format: TextureFormat = TextureFormat.RGBA8
    filter: TextureFilter = TextureFilter.MIN_MAG_LINEAR
    wrap_mode: TextureWrap = TextureWrap.CLAMP
    data: list[Optional[bytes]] = field(default_factory=list)

    @property
    def faces_count(self) -> int:
        return len(self.data)


_COMPARE_FUNCS = {
    CompareFunc.ALWAYS: GL_ALWAYS,
    CompareFunc.NEVER: GL_NEVER,
    CompareFunc.LESS: GL_LESS,
    CompareFunc.LESS_EQUAL: GL_LEQUAL,
    CompareFunc.GREATER: GL_GREATER,
    CompareFunc.GREATER_EQUAL: GL_GEQUAL,
    CompareFunc.NOT_EQUAL: GL_NOTEQUAL,
}

_OPERATIONS = {
    Operation.KEEP: GL_KEEP,
    Operation.ZERO: GL_ZERO,
    Operation.INVERT: GL_INVERT,
    Operation.REPLACE: GL_REPLACE,
    Operation.INCR: GL_INCR,
    Operation.DECR: GL_DECR,
    Operation.INCR_WRAP: GL_INCR_WRAP,
    Operation.DECR_WRAP: GL_DECR_WRAP,
}

_BLEND_MODES = {
    BlendMode.ZERO: GL_ZERO,
    BlendMode.ONE: GL_ONE,
    BlendMode.SRC_COLOR: GL_SRC_COLOR,
    BlendMode.DEST_COLOR: GL_DST_COLOR,
    BlendMode.SRC_ALPHA: GL_SRC_ALPHA,
    BlendMode.DEST_ALPHA: GL_DST_ALPHA,
    BlendMode.INV_SRC_COLOR: GL_ONE_MINUS_SRC_COLOR,
    BlendMode.INV_DEST_COLOR: GL_ONE_MINUS_DST_COLOR,
    BlendMode.INV_SRC_ALPHA: GL_ONE_MINUS_SRC_ALPHA,
    BlendMode.INV_DEST_ALPHA: GL_ONE_MINUS_DST_ALPHA,
    BlendMode.SRC_ALPHA_SATURATE: GL_SRC_ALPHA_SATURATE,
}

_CULL_ORDERS = {
    CullOrder.CLOCKWISE: GL_CW,
    CullOrder.COUNTER_CLOCKWISE: GL_CCW,
}

_CULL_MODES = {
    CullMode.FRONT: GL_FRONT,
    CullMode.BACK: GL_BACK,
    CullMode.FRONT_AND_BACK: GL_FRONT_AND_BACK,
}

_BUFFER_TYPES = {
    BufferType.VERTEX: GL_ARRAY_BUFFER,
    BufferType.INDEX: GL_ELEMENT_ARRAY_BUFFER,
    BufferType.UNIFORM: GL_UNIFORM_BUFFER,
}

_BUFFER_USAGES = {
    BufferUsage.DYNAMIC_DRAW: GL_DYNAMIC_DRAW,
    BufferUsage.DYNAMIC_READ: GL_DYNAMIC_READ,
    BufferUsage.STATIC_DRAW: GL_STATIC_DRAW,
    BufferUsage.STATIC_READ: GL_STATIC_READ,
}

_DRAW_MODES = {
    DrawMode.POINT: GL_POINTS,
    DrawMode.TRIANGLE: GL_TRIANGLES,
    DrawMode.TRIANGLE_STRIP: GL_TRIANGLE_STRIP,
    DrawMode.LINE: GL_LINES,
    DrawMode.LINE_STRIP: GL_LINE_STRIP,
}

_ERROR_SOURCES = {
    GL_DEBUG_SOURCE_API: "API",
    GL_DEBUG_SOURCE_WINDOW_SYSTEM: "WINDOW_SYSTEM",
    GL_DEBUG_SOURCE_SHADER_COMPILER: "SHADER",
    GL_DEBUG_SOURCE_THIRD_PARTY: "THIRD_PARTY",
    GL_DEBUG_SOURCE_APPLICATION: "APPLICATION",
    GL_DEBUG_SOURCE_OTHER: "OTHER",
}

_ERROR_TYPES = {
    GL_DEBUG_TYPE_ERROR: "ERROR",
    GL_DEBUG_TYPE_DEPRECATED_BEHAVIOR: "DEPRECATED",
    GL_DEBUG_TYPE_UNDEFINED_BEHAVIOR: "UNDEFINED_BEHAVIOR",
    GL_DEBUG_TYPE_PORTABILITY: "PORTABILITY",
    GL_DEBUG_TYPE_PERFORMANCE: "PERFORMANCE",
    GL_DEBUG_TYPE_OTHER: "OTHER",
}

# (byte size, GL component type, component count)
_LAYOUTS = {
    LayoutType.FLOAT1: (_F32, GL_FLOAT, 1),
    LayoutType.FLOAT2: (_F32 * 2, GL_FLOAT, 2),
    LayoutType.FLOAT3: (_F32 * 3, GL_FLOAT, 3),
    LayoutType.FLOAT4: (_F32 * 4, GL_FLOAT, 4),
    LayoutType.INT1: (_I32, GL_INT, 1),
    LayoutType.INT2: (_I32 * 2, GL_INT, 2),
    LayoutType.INT3: (_I32 * 3, GL_INT, 3),
    LayoutType.INT4: (_I32 * 4, GL_INT, 4),
    LayoutType.UINT1: (_U32, GL_UNSIGNED_INT, 1),
    LayoutType.UINT2: (_U32 * 2, GL_UNSIGNED_INT, 2),
    LayoutType.UINT3: (_U32 * 3, GL_UNSIGNED_INT, 3),
    LayoutType.UINT4: (_U32 * 4, GL_UNSIGNED_INT, 4),
    LayoutType.MAT2: (_F32 * 4, GL_FLOAT, 2),
    LayoutType.MAT3: (_F32 * 9, GL_FLOAT, 3),
    LayoutType.MAT4: (_F32 * 16, GL_FLOAT, 4),
}

# (semantic count, semantic byte size)
_SEMANTICS = {
    LayoutType.MAT2: (2, _F32 * 2),
    LayoutType.MAT3: (3, _F32 * 3),
    LayoutType.MAT4: (4, _F32 * 4),
}

_TEXTURE_FORMATS = {
    TextureFormat.R8: (GL_R8, GL_RED, GL_UNSIGNED_BYTE),
    TextureFormat.R16: (GL_R16, GL_RED, GL_UNSIGNED_SHORT),
    TextureFormat.RG8: (GL_RG8, GL_RG, GL_UNSIGNED_BYTE),
    TextureFormat.RG16: (GL_RG16, GL_RG, GL_UNSIGNED_SHORT),
    TextureFormat.RGBA8: (GL_RGBA8, GL_RGBA, GL_UNSIGNED_BYTE),
    TextureFormat.RGBA16: (GL_RGBA16, GL_RGBA, GL_UNSIGNED_SHORT),
    TextureFormat.DEPTH_STENCIL_24_8: (GL_DEPTH24_STENCIL8, GL_DEPTH_STENCIL, GL_UNSIGNED_INT_24_8),
}

_TEXTURE_FILTERS = {
    TextureFilter.MIN_MAG_LINEAR: (GL_LINEAR, GL_LINEAR),
    TextureFilter.MIN_MAG_NEAREST: (GL_NEAREST, GL_NEAREST),
    TextureFilter.MIN_LINEAR_MAG_NEAREST: (GL_LINEAR, GL_NEAREST),
    TextureFilter.MIN_NEAREST_MAG_LINEAR: (GL_NEAREST, GL_LINEAR),
    TextureFilter.MIN_TRILINEAR_MAG_LINEAR: (GL_LINEAR_MIPMAP_LINEAR, GL_LINEAR),
    TextureFilter.MIN_TRILINEAR_MAG_NEAREST: (GL_LINEAR_MIPMAP_LINEAR, GL_NEAREST),
}

_TEXTURE_WRAPS = {
    TextureWrap.REPEAT: GL_REPEAT,
    TextureWrap.MIRROR: GL_MIRRORED_REPEAT,
    TextureWrap.CLAMP: GL_CLAMP_TO_EDGE,
    TextureWrap.BORDER_COLOR: GL_CLAMP_TO_BORDER,
}


def gl_compare_func(func: CompareFunc) -> int:
    """GL comparison function; 0 for an unknown value."""
    return _COMPARE_FUNCS.get(func, 0)


def gl_operation(op: Operation) -> int:
    """GL stencil operation; 0 for an unknown value."""
    return _OPERATIONS.get(op, 0)


def gl_blend_mode(mode: BlendMode) -> int:
    """GL blend factor; 0 for an unknown value."""
    return _BLEND_MODES.get(mode, 0)


def gl_cull_order(order: CullOrder) -> int:
    """GL front-face winding; 0 for an unknown value."""
    return _CULL_ORDERS.get(order, 0)


def gl_cull_mode(mode: CullMode) -> int:
    """GL face selector; 0 for an unknown value."""
    return _CULL_MODES.get(mode, 0)


def gl_buffer_type(type: BufferType) -> int:
    """GL buffer binding target."""
    try:
        return _BUFFER_TYPES[type]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown buffer type: {type!r}") from None


def gl_buffer_usage(usage: BufferUsage) -> int:
    """GL buffer usage hint; 0 for an unknown value."""
    return _BUFFER_USAGES.get(usage, 0)


def gl_draw_mode(mode: DrawMode) -> int:
    """GL primitive type; 0 for an unknown value."""
    return _DRAW_MODES.get(mode, 0)


def gl_error_source(src: int) -> str:
    """Short name of a GL debug message source; ``"DEF"`` when unknown."""
    return _ERROR_SOURCES.get(src, "DEF")


def gl_error_type(type: int) -> str:
    """Short name of a GL debug message type; ``"DEF"`` when unknown."""
    return _ERROR_TYPES.get(type, "DEF")


def layout_size(layout: LayoutType) -> int:
    """Size in bytes of one attribute of this layout; 0 when unknown."""
    entry = _LAYOUTS.get(layout)
    return entry[0] if entry else 0


def layout_component_type(layout: LayoutType) -> int:
    """GL component type of the layout; 0 when unknown."""
    entry = _LAYOUTS.get(layout)
    return entry[1] if entry else 0


def layout_component_count(layout: LayoutType) -> int:
    """Components per attribute slot; 0 when unknown."""
    entry = _LAYOUTS.get(layout)
    return entry[2] if entry else 0


def semantic_count(layout: LayoutType) -> int:
    """Number of attribute slots the layout spans: a matrix takes one per column."""
    entry = _SEMANTICS.get(layout)
    return entry[0] if entry else 1


def semantic_size(layout: LayoutType) -> int:
    """Size in bytes of one slot of a matrix layout; 0 for other layouts."""
    entry = _SEMANTICS.get(layout)
    return entry[1] if entry else 0


def is_semantic(layout: LayoutType) -> bool:
    """Whether the layout is a matrix spread over several attribute slots."""
    return layout in _SEMANTICS


def calc_stride(layouts: Iterable[LayoutDesc]) -> int:
    """Bytes between consecutive vertices for this layout."""
    return sum(layout_size(layout.type) for layout in layouts)


def attribute_formats(layouts: Sequence[LayoutDesc]) -> list[AttribFormat]:
    """The attribute slots a layout occupies, in order, with byte offsets."""
    formats: list[AttribFormat] = []
    offset = 0
    index = 0
    for layout in layouts:
        component_type = layout_component_type(layout.type)
        component_count = layout_component_count(layout.type)
        if is_semantic(layout.type):
            slots = semantic_count(layout.type)
            step = semantic_size(layout.type)
            for slot in range(slots):
                formats.append(
                    AttribFormat(index + slot, component_count, component_type, offset, layout.instance_rate)
                )
                offset += step
            index += slots - 1
        else:
            formats.append(
                AttribFormat(index, component_count, component_type, offset, layout.instance_rate)
            )
            offset += layout_size(layout.type)
        index += 1
    return formats


def texture_gl_format(format: TextureFormat) -> tuple[int, int, int]:
    """(internal format, pixel format, pixel type) for a texture format."""
    try:
        return _TEXTURE_FORMATS[format]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown texture format: {format!r}") from None


def texture_gl_filter(filter: TextureFilter) -> tuple[int, int]:
    """(minification, magnification) filters for a texture filter."""
    try:
        return _TEXTURE_FILTERS[filter]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown texture filter: {filter!r}") from None


def texture_gl_wrap(wrap: TextureWrap) -> int:
    """GL addressing mode; 0 for an unknown value."""
    return _TEXTURE_WRAPS.get(wrap, 0)


def clear_bits_for(flags: int, framebuffer_clear_bits: int) -> int:
    """The GL clear mask a frame uses under ``flags``.

    A custom render target starts from the framebuffer's own clear bits;
    the colour, depth and stencil flags add their buffers. ``NONE`` clears
    nothing.
    """
    flags = ContextFlags(flags)
    if ContextFlags.NONE in flags:
        return 0

    bits = 0
    if ContextFlags.CUSTOM_RENDER_TARGET in flags:
        bits = framebuffer_clear_bits
    if ContextFlags.CLEAR_COLOR_BUFFER in flags:
        bits |= GL_COLOR_BUFFER_BIT
    if ContextFlags.CLEAR_DEPTH_BUFFER in flags:
        bits |= GL_DEPTH_BUFFER_BIT
    if ContextFlags.CLEAR_STENCIL_BUFFER in flags:
        bits |= GL_STENCIL_BUFFER_BIT
    return bits