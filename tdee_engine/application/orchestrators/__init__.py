"""Orchestrators coordinating domain calculation services."""

from .daily_energy_orchestrator import DailyEnergyOrchestrator, DailyEnergyInput

__all__ = ["DailyEnergyOrchestrator", "DailyEnergyInput"]
