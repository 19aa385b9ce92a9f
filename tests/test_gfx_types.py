import pytest

from nikola import gfx_types as gt
from nikola.gfx_types import (
    AttribFormat,
    BlendMode,
    BufferType,
    BufferUsage,
    CompareFunc,
    ContextFlags,
    CubemapDesc,
    CullMode,
    CullOrder,
    DrawMode,
    LayoutDesc,
    LayoutType,
    Operation,
    TextureFilter,
    TextureFormat,
    TextureWrap,
    attribute_formats,
    calc_stride,
    clear_bits_for,
    gl_blend_mode,
    gl_buffer_type,
    gl_buffer_usage,
    gl_compare_func,
    gl_cull_mode,
    gl_cull_order,
    gl_draw_mode,
    gl_error_source,
    gl_error_type,
    gl_operation,
    is_semantic,
    layout_component_count,
    layout_component_type,
    layout_size,
    semantic_count,
    semantic_size,
    texture_gl_filter,
    texture_gl_format,
    texture_gl_wrap,
)

MATRICES = (LayoutType.MAT2, LayoutType.MAT3, LayoutType.MAT4)
VECTORS = tuple(t for t in LayoutType if t not in MATRICES)


def test_compare_funcs_are_distinct_and_known():
    values = [gl_compare_func(f) for f in CompareFunc]
    assert len(set(values)) == len(values)
    assert gl_compare_func(CompareFunc.LESS_EQUAL) == gt.GL_LEQUAL
    assert gl_compare_func(CompareFunc.ALWAYS) == 0x0207


def test_unknown_values_map_to_zero():
    assert gl_compare_func("bogus") == 0
    assert gl_operation("bogus") == 0
    assert gl_blend_mode("bogus") == 0
    assert gl_cull_order("bogus") == 0
    assert gl_cull_mode("bogus") == 0
    assert gl_buffer_usage("bogus") == 0
    assert gl_draw_mode("bogus") == 0
    assert texture_gl_wrap("bogus") == 0


def test_operations():
    assert gl_operation(Operation.ZERO) == gt.GL_ZERO
    assert gl_operation(Operation.KEEP) == gt.GL_KEEP
    assert gl_operation(Operation.DECR_WRAP) == gt.GL_DECR_WRAP


def test_blend_modes():
    assert gl_blend_mode(BlendMode.INV_SRC_ALPHA) == gt.GL_ONE_MINUS_SRC_ALPHA
    assert gl_blend_mode(BlendMode.DEST_COLOR) == gt.GL_DST_COLOR
    assert gl_blend_mode(BlendMode.ONE) == gt.GL_ONE


def test_cull():
    assert gl_cull_order(CullOrder.CLOCKWISE) == gt.GL_CW
    assert gl_cull_order(CullOrder.COUNTER_CLOCKWISE) == gt.GL_CCW
    assert gl_cull_mode(CullMode.FRONT_AND_BACK) == gt.GL_FRONT_AND_BACK


def test_buffer_types_and_usage():
    assert gl_buffer_type(BufferType.INDEX) == gt.GL_ELEMENT_ARRAY_BUFFER
    assert gl_buffer_type(BufferType.UNIFORM) == gt.GL_UNIFORM_BUFFER
    assert gl_buffer_usage(BufferUsage.DYNAMIC_READ) == gt.GL_DYNAMIC_READ
    with pytest.raises(ValueError):
        gl_buffer_type("bogus")


def test_draw_modes():
    assert gl_draw_mode(DrawMode.TRIANGLE) == gt.GL_TRIANGLES
    assert gl_draw_mode(DrawMode.LINE_STRIP) == gt.GL_LINE_STRIP
    assert gl_draw_mode(DrawMode.POINT) == gt.GL_POINTS


@pytest.mark.parametrize(
    "src, name",
    [
        (gt.GL_DEBUG_SOURCE_API, "API"),
        (gt.GL_DEBUG_SOURCE_SHADER_COMPILER, "SHADER"),
        (gt.GL_DEBUG_SOURCE_THIRD_PARTY, "THIRD_PARTY"),
        (12345, "DEF"),
    ],
)
def test_error_source(src, name):
    assert gl_error_source(src) == name


@pytest.mark.parametrize(
    "kind, name",
    [
        (gt.GL_DEBUG_TYPE_DEPRECATED_BEHAVIOR, "DEPRECATED"),
        (gt.GL_DEBUG_TYPE_PERFORMANCE, "PERFORMANCE"),
        (12345, "DEF"),
    ],
)
def test_error_type(kind, name):
    assert gl_error_type(kind) == name


@pytest.mark.parametrize("layout", VECTORS)
def test_vector_layout_size_is_count_of_words(layout):
    assert layout_size(layout) == layout_component_count(layout) * 4
    assert semantic_count(layout) == 1
    assert semantic_size(layout) == 0
    assert not is_semantic(layout)


@pytest.mark.parametrize("layout", MATRICES)
def test_matrix_layout_is_split_into_columns(layout):
    assert is_semantic(layout)
    assert semantic_count(layout) * semantic_size(layout) == layout_size(layout)
    assert layout_component_count(layout) == semantic_count(layout)
    assert layout_component_type(layout) == gt.GL_FLOAT


def test_component_types():
    assert layout_component_type(LayoutType.INT3) == gt.GL_INT
    assert layout_component_type(LayoutType.UINT2) == gt.GL_UNSIGNED_INT
    assert layout_component_type(LayoutType.FLOAT1) == 0x1406
    assert layout_size("bogus") == 0


def test_stride_is_sum_of_sizes():
    layouts = [LayoutDesc(LayoutType.FLOAT3), LayoutDesc(LayoutType.FLOAT2), LayoutDesc(LayoutType.MAT4)]
    assert calc_stride(layouts) == sum(layout_size(layout.type) for layout in layouts)
    assert calc_stride([]) == 0


def test_attribute_formats_indices_and_offsets():
    layouts = [
        LayoutDesc(LayoutType.FLOAT3),
        LayoutDesc(LayoutType.MAT4, instance_rate=1),
        LayoutDesc(LayoutType.FLOAT2),
    ]
    formats = attribute_formats(layouts)
    assert [f.index for f in formats] == [0, 1, 2, 3, 4, 5]
    assert formats[0] == AttribFormat(0, 3, gt.GL_FLOAT, 0, 0)
    matrix_slots = formats[1:5]
    assert all(f.instance_rate == 1 for f in matrix_slots)
    assert all(f.component_count == 4 for f in matrix_slots)
    offsets = [f.offset for f in formats]
    assert offsets == sorted(offsets)
    assert formats[1].offset == layout_size(LayoutType.FLOAT3)
    last = formats[-1]
    assert last.offset + layout_size(LayoutType.FLOAT2) == calc_stride(layouts)


def test_attribute_formats_of_vectors_only():
    layouts = [LayoutDesc(LayoutType.INT1), LayoutDesc(LayoutType.UINT4)]
    formats = attribute_formats(layouts)
    assert [f.index for f in formats] == [0, 1]
    assert formats[1].offset == layout_size(LayoutType.INT1)
    assert formats[1].component_type == gt.GL_UNSIGNED_INT


def test_texture_formats():
    assert texture_gl_format(TextureFormat.DEPTH_STENCIL_24_8) == (
        gt.GL_DEPTH24_STENCIL8,
        gt.GL_DEPTH_STENCIL,
        gt.GL_UNSIGNED_INT_24_8,
    )
    assert texture_gl_format(TextureFormat.RG16) == (gt.GL_RG16, gt.GL_RG, gt.GL_UNSIGNED_SHORT)
    with pytest.raises(ValueError):
        texture_gl_format("bogus")


def test_texture_filters_and_wraps():
    assert texture_gl_filter(TextureFilter.MIN_TRILINEAR_MAG_NEAREST) == (
        gt.GL_LINEAR_MIPMAP_LINEAR,
        gt.GL_NEAREST,
    )
    assert texture_gl_filter(TextureFilter.MIN_NEAREST_MAG_LINEAR) == (gt.GL_NEAREST, gt.GL_LINEAR)
    assert texture_gl_wrap(TextureWrap.MIRROR) == gt.GL_MIRRORED_REPEAT
    assert texture_gl_wrap(TextureWrap.BORDER_COLOR) == gt.GL_CLAMP_TO_BORDER
    with pytest.raises(ValueError):
        texture_gl_filter("bogus")


def test_clear_bits_none_clears_nothing():
    flags = ContextFlags.NONE | ContextFlags.CLEAR_COLOR_BUFFER
    assert clear_bits_for(flags, gt.GL_STENCIL_BUFFER_BIT) == 0


def test_clear_bits_combine_buffers():
    flags = ContextFlags.CLEAR_COLOR_BUFFER | ContextFlags.CLEAR_DEPTH_BUFFER
    assert clear_bits_for(flags, gt.GL_STENCIL_BUFFER_BIT) == gt.GL_COLOR_BUFFER_BIT | gt.GL_DEPTH_BUFFER_BIT


def test_clear_bits_custom_target_uses_framebuffer_bits():
    flags = ContextFlags.CUSTOM_RENDER_TARGET | ContextFlags.CLEAR_COLOR_BUFFER
    bits = clear_bits_for(flags, gt.GL_DEPTH_BUFFER_BIT | gt.GL_STENCIL_BUFFER_BIT)
    assert bits == gt.GL_COLOR_BUFFER_BIT | gt.GL_DEPTH_BUFFER_BIT | gt.GL_STENCIL_BUFFER_BIT
    assert clear_bits_for(ContextFlags.ENABLE_VSYNC, gt.GL_DEPTH_BUFFER_BIT) == 0


def test_cubemap_faces_count_follows_data():
    desc = CubemapDesc(width=2, height=2, data=[b"a", b"b", b"c"])
    assert desc.faces_count == 3
    desc.data.append(b"d")
    assert desc.faces_count == 4