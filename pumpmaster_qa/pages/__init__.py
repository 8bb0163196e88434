# Screen models composed over a shared InteractionKit

from .interaction_kit import DeviceClass, InteractionKit, LayoutError, classify_viewport
from .login_page import LoginPage
from .pump_edit_modal import PumpEditModal
from .pumps_overview_page import PumpsOverviewPage

__all__ = [
    "InteractionKit",
    "DeviceClass",
    "LayoutError",
    "classify_viewport",
    "LoginPage",
    "PumpsOverviewPage",
    "PumpEditModal",
]
