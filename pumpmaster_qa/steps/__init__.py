# Given/When/Then step classes

from .api_steps import ApiSteps
from .login_steps import LoginSteps
from .pump_management_steps import PumpManagementSteps
from .pump_overview_steps import PumpOverviewSteps

__all__ = [
    "ApiSteps",
    "LoginSteps",
    "PumpManagementSteps",
    "PumpOverviewSteps",
]
