#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

class TorusRendererError(Exception):
    """Base class for errors raised by this package."""


class InputPollerError(TorusRendererError):
    """The key source failed; the input poller cannot continue."""
