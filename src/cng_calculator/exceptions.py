"""Errors raised by manual distribution edits."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A requested edit is inconsistent with the fleet configuration."""


class FleetLimitExceeded(ConfigurationError):
    """A manual edit would deploy more vehicles of a class than configured."""

    def __init__(self, vehicle_class: str, requested_total: int, limit: int):
        self.vehicle_class = vehicle_class
        self.requested_total = requested_total
        self.limit = limit
        super().__init__(
            f"{vehicle_class} duty allocation of {requested_total} vehicles exceeds "
            f"the configured fleet of {limit}"
        )
