"""
Loading limits for container kinds.

Fractions are applied to a container's rated maximum capacity. Override per
fleet in future if needed.
"""

from __future__ import annotations

# Non-hazardous liquid cargo may fill 90% of rated capacity
LIQUID_FILL_FRACTION = 0.9

# Hazardous liquid cargo is limited to half of rated capacity
HAZARDOUS_LIQUID_FILL_FRACTION = 0.5

# Gas containers keep 5% residual load after unloading
GAS_RESIDUAL_FRACTION = 0.05

# Serial numbers: KON-<type code>-<n>
SERIAL_PREFIX = "KON"

# Floating-point tolerance
EPS = 1e-9
