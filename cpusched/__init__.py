"""CPU scheduling simulations and a step-by-step dining philosophers model."""

__version__ = "0.1.0"