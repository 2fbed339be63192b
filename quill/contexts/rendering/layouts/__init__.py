"""The eight resume layouts. Each is registered in layout_registry."""

from quill.contexts.rendering.layouts.bold import BoldLayout
from quill.contexts.rendering.layouts.classic import ClassicLayout
from quill.contexts.rendering.layouts.creative import CreativeLayout
from quill.contexts.rendering.layouts.elegant import ElegantLayout
from quill.contexts.rendering.layouts.minimal import MinimalLayout
from quill.contexts.rendering.layouts.modern import ModernLayout
from quill.contexts.rendering.layouts.sidebar import SidebarLayout
from quill.contexts.rendering.layouts.tech import TechLayout

__all__ = [
    "BoldLayout",
    "ClassicLayout",
    "CreativeLayout",
    "ElegantLayout",
    "MinimalLayout",
    "ModernLayout",
    "SidebarLayout",
    "TechLayout",
]
