"""A teaching operating-system simulator with resource accounting, multilevel ready queues and small console applications."""

__version__ = "0.1.0"