"""Configuration models — every calculator input type."""

from cng_calculator.config.vehicle import VEHICLE_CLASSES, FleetConfig, VehicleClassConfig
from cng_calculator.config.station import StationConfig
from cng_calculator.config.fuel import FuelPriceConfig
from cng_calculator.config.strategy import AUTOMATIC_STRATEGIES, DeploymentStrategy
from cng_calculator.config.scenario import Scenario, apply_parameter_update, load_scenario

__all__ = [
    "VEHICLE_CLASSES",
    "VehicleClassConfig",
    "FleetConfig",
    "StationConfig",
    "FuelPriceConfig",
    "DeploymentStrategy",
    "AUTOMATIC_STRATEGIES",
    "Scenario",
    "apply_parameter_update",
    "load_scenario",
]
