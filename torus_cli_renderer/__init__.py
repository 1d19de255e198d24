#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .config import TorusConfig, detect_terminal_size
from .sampler import SurfaceSample, TorusSampler
from .projector import Projector, Rotation, ScreenPoint
from .framebuffer import FrameBuffer, LUMINANCE_RAMP, luminance_index
from .renderer import Renderer
from .display import StreamDisplay, CursesDisplay
from .input import Key, InputPoller, CursesKeySource, classify_key
from .animation import AnimationController, AnimationState, ControllerState
from .errors import TorusRendererError, InputPollerError
