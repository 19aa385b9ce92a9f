"""The graphics context and GPU buffers."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from nikola.events import Event, EventType
from nikola.gfx_types import (
    CUBEMAPS_MAX,
    GL_COLOR_BUFFER_BIT,
    GL_DEBUG_SEVERITY_HIGH,
    GL_DEBUG_SEVERITY_LOW,
    GL_DEBUG_SEVERITY_MEDIUM,
    GL_DEBUG_SEVERITY_NOTIFICATION,
    GL_MINIMUM_MAJOR_VERSION,
    GL_MINIMUM_MINOR_VERSION,
    STATE_CAPABILITIES,
    TEXTURES_MAX,
    BlendDesc,
    BufferDesc,
    ContextFlags,
    CullDesc,
    DepthDesc,
    GfxStates,
    StencilDesc,
    clear_bits_for,
    gl_blend_mode,
    gl_buffer_type,
    gl_buffer_usage,
    gl_compare_func,
    gl_cull_mode,
    gl_cull_order,
    gl_error_source,
    gl_error_type,
    gl_operation,
)
from nikola.logger import LogLevel, check, log

__all__ = ["GfxContextDesc", "GfxContext", "GfxBuffer"]

DebugCallback = Callable[[int, int, int, int, str], None]


class _PygletGL:
    """OpenGL calls made through pyglet's bindings on the current context."""

    def __init__(self) -> None:
        from pyglet import gl

        if getattr(gl, "current_context", None) is None:
            raise RuntimeError("No current OpenGL context")
        self._gl = gl
        self._debug_proc: Any = None

    def enable(self, cap: int) -> None:
        self._gl.glEnable(cap)

    def disable(self, cap: int) -> None:
        self._gl.glDisable(cap)

    def depth_func(self, func: int) -> None:
        self._gl.glDepthFunc(func)

    def depth_mask(self, flag: bool) -> None:
        self._gl.glDepthMask(bool(flag))

    def stencil_func_separate(self, face: int, func: int, ref: int, mask: int) -> None:
        self._gl.glStencilFuncSeparate(face, func, ref, mask)

    def stencil_op_separate(self, face: int, sfail: int, dfail: int, dpass: int) -> None:
        self._gl.glStencilOpSeparate(face, sfail, dfail, dpass)

    def stencil_mask_separate(self, face: int, mask: int) -> None:
        self._gl.glStencilMaskSeparate(face, mask)

    def stencil_mask(self, mask: int) -> None:
        self._gl.glStencilMask(mask)

    def blend_func_separate(self, src_color: int, dst_color: int, src_alpha: int, dst_alpha: int) -> None:
        self._gl.glBlendFuncSeparate(src_color, dst_color, src_alpha, dst_alpha)

    def blend_color(self, r: float, g: float, b: float, a: float) -> None:
        self._gl.glBlendColor(r, g, b, a)

    def cull_face(self, mode: int) -> None:
        self._gl.glCullFace(mode)

    def front_face(self, mode: int) -> None:
        self._gl.glFrontFace(mode)

    def viewport(self, x: int, y: int, width: int, height: int) -> None:
        self._gl.glViewport(x, y, width, height)

    def create_framebuffer(self) -> int:
        fb = self._gl.GLuint()
        self._gl.glCreateFramebuffers(1, fb)
        return fb.value

    def delete_framebuffer(self, fb: int) -> None:
        self._gl.glDeleteFramebuffers(1, self._gl.GLuint(fb))

    def bind_framebuffer(self, fb: int) -> None:
        self._gl.glBindFramebuffer(self._gl.GL_FRAMEBUFFER, fb)

    def clear(self, bits: int) -> None:
        self._gl.glClear(bits)

    def clear_color(self, r: float, g: float, b: float, a: float) -> None:
        self._gl.glClearColor(r, g, b, a)

    def create_buffer(self) -> int:
        buf = self._gl.GLuint()
        self._gl.glCreateBuffers(1, buf)
        return buf.value

    def named_buffer_data(self, buffer: int, size: int, data: Optional[bytes], usage: int) -> None:
        self._gl.glNamedBufferData(buffer, size, data, usage)

    def named_buffer_sub_data(self, buffer: int, offset: int, size: int, data: Optional[bytes]) -> None:
        self._gl.glNamedBufferSubData(buffer, offset, size, data)

    def delete_buffer(self, buffer: int) -> None:
        self._gl.glDeleteBuffers(1, self._gl.GLuint(buffer))

    def version(self) -> tuple[int, int]:
        major = self._gl.GLint()
        minor = self._gl.GLint()
        self._gl.glGetIntegerv(self._gl.GL_MAJOR_VERSION, major)
        self._gl.glGetIntegerv(self._gl.GL_MINOR_VERSION, minor)
        return major.value, minor.value

    def info(self) -> dict[str, str]:
        from pyglet.gl import gl_info

        version = getattr(gl_info, "get_version_string", gl_info.get_version)()
        return {
            "vendor": str(gl_info.get_vendor()),
            "renderer": str(gl_info.get_renderer()),
            "gl_version": str(version),
            "glsl_version": "n/a",
        }

    def enable_debug_output(self, callback: DebugCallback) -> None:
        gl = self._gl
        proc_type = getattr(gl, "GLDEBUGPROC", None)
        if proc_type is None:
            log(LogLevel.WARN, "GL-BACKEND: debug output is not available")
            return

        def proc(source, type, id, severity, length, message, user):
            text = message[:length].decode(errors="replace") if message else ""
            callback(source, type, id, severity, text)

        self._debug_proc = proc_type(proc)
        gl.glEnable(gl.GL_DEBUG_OUTPUT)
        gl.glDebugMessageCallback(self._debug_proc, None)


@dataclass
class GfxContextDesc:
    """How to set up a graphics context on a window."""

    window: Any
    states: GfxStates = GfxStates(0)
    depth_desc: DepthDesc = field(default_factory=DepthDesc)
    stencil_desc: StencilDesc = field(default_factory=StencilDesc)
    blend_desc: BlendDesc = field(default_factory=BlendDesc)
    cull_desc: CullDesc = field(default_factory=CullDesc)
    debug: bool = False


class GfxContext:
    """An OpenGL context bound to a window, with its fixed-function state."""

    def __init__(self, desc: GfxContextDesc, gl: Any = None) -> None:
        self.desc = desc
        self.default_clear_bits = GL_COLOR_BUFFER_BIT
        self.has_vsync = False
        self.current_clear_bits = 0
        self.current_framebuffer = 0
        bus = desc.window.bus

        if gl is None:
            try:
                gl = _PygletGL()
            except (ImportError, RuntimeError, OSError) as exc:
                log(LogLevel.FATAL, "Could not create an OpenGL instance", bus=bus)
                raise RuntimeError("Could not create an OpenGL instance") from exc
        self.gl = gl

        if desc.debug:
            gl.enable_debug_output(self._on_debug_message)

        self.framebuffer_id = gl.create_framebuffer()
        self.framebuffer_clear_bits = GL_COLOR_BUFFER_BIT

        desc.window.make_current()
        gl.viewport(0, 0, desc.window.state.width, desc.window.state.height)

        self.states = GfxStates(desc.states)
        self._apply_states()

        self._alive = True
        bus.listen(EventType.WINDOW_FRAMEBUFFER_RESIZED, self._on_framebuffer_resize, self)

        info = gl.info()
        major, minor = gl.version()
        check(
            major >= GL_MINIMUM_MAJOR_VERSION and minor >= GL_MINIMUM_MINOR_VERSION,
            "major >= GL_MINIMUM_MAJOR_VERSION && minor >= GL_MINIMUM_MINOR_VERSION",
            "OpenGL versions less than 4.2 are not supported",
        )

        log(
            LogLevel.INFO,
            "An OpenGL graphics context was successfully created:\n"
            "              VENDOR: %s\n"
            "              RENDERER: %s\n"
            "              GL VERSION: %s\n"
            "              GLSL VERSION: %s",
            info.get("vendor", ""),
            info.get("renderer", ""),
            info.get("gl_version", ""),
            info.get("glsl_version", ""),
        )

    def __enter__(self) -> "GfxContext":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    # Callbacks

    def _on_framebuffer_resize(self, event: Event, dispatcher: Any, listener: Any) -> bool:
        if event.type is not EventType.WINDOW_FRAMEBUFFER_RESIZED or not self._alive:
            return False
        self.gl.viewport(0, 0, event.window_framebuffer_width, event.window_framebuffer_height)
        return True

    def _on_debug_message(self, source: int, type: int, id: int, severity: int, message: str) -> None:
        levels = {
            GL_DEBUG_SEVERITY_HIGH: LogLevel.FATAL,
            GL_DEBUG_SEVERITY_MEDIUM: LogLevel.ERROR,
            GL_DEBUG_SEVERITY_LOW: LogLevel.WARN,
            GL_DEBUG_SEVERITY_NOTIFICATION: LogLevel.DEBUG,
        }
        level = levels.get(severity)
        if level is None:
            return
        log(
            level,
            "GL-BACKEND: %s-%s (ID = %i): %s",
            gl_error_source(source),
            gl_error_type(type),
            id,
            message,
            bus=self.desc.window.bus,
        )

    # State setup

    def _apply_states(self) -> None:
        gl = self.gl
        desc = self.desc

        gl.depth_func(gl_compare_func(desc.depth_desc.compare_func))
        gl.depth_mask(desc.depth_desc.depth_write_enabled)

        stencil = desc.stencil_desc
        face = gl_cull_mode(stencil.polygon_face)
        gl.stencil_func_separate(face, gl_compare_func(stencil.compare_func), stencil.ref, stencil.mask)
        gl.stencil_op_separate(
            face,
            gl_operation(stencil.stencil_fail_op),
            gl_operation(stencil.depth_fail_op),
            gl_operation(stencil.depth_pass_op),
        )
        gl.stencil_mask_separate(face, stencil.mask)

        blend = desc.blend_desc
        gl.blend_func_separate(
            gl_blend_mode(blend.src_color_blend),
            gl_blend_mode(blend.dest_color_blend),
            gl_blend_mode(blend.src_alpha_blend),
            gl_blend_mode(blend.dest_alpha_blend),
        )
        gl.blend_color(*blend.blend_factor)

        gl.cull_face(gl_cull_mode(desc.cull_desc.cull_mode))
        gl.front_face(gl_cull_order(desc.cull_desc.front_face))

        for state in STATE_CAPABILITIES:
            if state in self.states:
                self.set_state(state, True)

    # Public interface

    def shutdown(self) -> None:
        """Release the context's framebuffer; later calls do nothing."""
        if not self._alive:
            return
        self._alive = False
        self.gl.delete_framebuffer(self.framebuffer_id)
        log(LogLevel.INFO, "The graphics context was successfully destroyed")

    def set_state(self, state: GfxStates, value: bool) -> None:
        """Switch one pipeline state on or off."""
        capability = STATE_CAPABILITIES.get(GfxStates(state))
        if capability is None:
            return
        if value:
            self.gl.enable(capability)
        else:
            self.gl.disable(capability)

    def clear(self, r: float, g: float, b: float, a: float, flags: int) -> None:
        """Bind the frame's render target and clear the buffers ``flags`` select."""
        flags = ContextFlags(flags)
        active = ContextFlags.NONE not in flags
        self.has_vsync = active and ContextFlags.ENABLE_VSYNC in flags
        self.current_framebuffer = (
            self.framebuffer_id if active and ContextFlags.CUSTOM_RENDER_TARGET in flags else 0
        )
        self.current_clear_bits = clear_bits_for(flags, self.framebuffer_clear_bits)

        self.gl.bind_framebuffer(self.current_framebuffer)
        self.gl.clear(self.current_clear_bits)
        self.gl.clear_color(r, g, b, a)

    def apply_pipeline(self, pipeline: Any, desc: Any) -> None:
        """Give ``pipeline`` a new description and set its per-draw state.

        ``desc`` supplies ``shader``, ``textures``, ``cubemaps``,
        ``depth_mask``, ``stencil_ref`` and ``blend_factor``.
        """
        check(pipeline is not None, "pipeline", "Invalid GfxPipeline struct passed")
        check(len(desc.textures) <= TEXTURES_MAX, "textures_count <= TEXTURES_MAX", "Too many textures")
        check(len(desc.cubemaps) <= CUBEMAPS_MAX, "cubemaps_count <= CUBEMAPS_MAX", "Too many cubemaps")

        pipeline.desc = desc
        pipeline.shader = desc.shader
        pipeline.textures = [texture.id for texture in desc.textures]
        pipeline.cubemaps = [cubemap.id for cubemap in desc.cubemaps]

        self.gl.depth_mask(desc.depth_mask)
        self.gl.stencil_mask(desc.stencil_ref)
        self.gl.blend_color(*desc.blend_factor)

    def present(self) -> None:
        """Show the rendered frame."""
        self.desc.window.swap_buffers()


class GfxBuffer:
    """A GPU buffer holding vertex, index or uniform data."""

    def __init__(self, gfx: Optional[GfxContext], desc: BufferDesc) -> None:
        check(gfx is not None, "gfx", "Invalid GfxContext struct passed")
        self.gfx = gfx
        self.desc = dataclasses.replace(desc)
        self.gl_type = gl_buffer_type(desc.type)
        self.gl_usage = gl_buffer_usage(desc.usage)

        self.id = gfx.gl.create_buffer()
        gfx.gl.named_buffer_data(self.id, desc.size, desc.data, self.gl_usage)

    def destroy(self) -> None:
        self.gfx.gl.delete_buffer(self.id)

    def update(self, offset: int, size: int, data: Optional[bytes]) -> None:
        """Overwrite ``size`` bytes starting at ``offset`` with ``data``."""
        check(self.gfx is not None, "gfx", "Invalid GfxContext struct passed")
        self.desc.size = size
        self.desc.data = data
        self.gfx.gl.named_buffer_sub_data(self.id, offset, size, data)