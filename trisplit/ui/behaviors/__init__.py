"""Qt behaviors attached to host widgets."""

from trisplit.ui.behaviors.container_width_behavior import ContainerWidthBehavior

__all__ = [
    "ContainerWidthBehavior",
]
