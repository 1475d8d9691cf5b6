"""
ui/
---
Presentation layer.

    from ui import render_grid
    from ui import mode_selector, algorithm_selector, …
"""

from ui.canvas import render_grid, CanvasConfig

from ui.controls import (
    mode_selector,
    algorithm_selector,
    speed_control,
    action_buttons,
    status_panel,
    metrics_panel,
    algorithm_info,
    pseudocode_viewer,
)

__all__ = [
    "render_grid",
    "CanvasConfig",
    "mode_selector",
    "algorithm_selector",
    "speed_control",
    "action_buttons",
    "status_panel",
    "metrics_panel",
    "algorithm_info",
    "pseudocode_viewer",
]
