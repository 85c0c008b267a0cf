"""Command grammar and tooling for the Matter BLE test shell."""

__version__ = "0.1.0"
