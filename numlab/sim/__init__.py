from .runner import SimulationResult, main, run_simulation

__all__ = ["SimulationResult", "main", "run_simulation"]
