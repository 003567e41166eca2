"""
flightrisk - Flight risk estimation core

Blends weather hazard with conflict-zone proximity into a single risk score
for a tracked flight, and dead-reckons the aircraft between telemetry fixes.
"""

__version__ = "0.3.0"
