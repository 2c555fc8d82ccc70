"""Controllers package."""
from .config_controller import ConfigController
from .plan_controller import PlanController

__all__ = [
    "ConfigController",
    "PlanController",
]
