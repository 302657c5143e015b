"""
Composite (derived) units and physical constants.

Each entry is parsed from its expression at import time, so an entry may
only reference symbols defined above it.
"""

from physanalysis.catalog.units import ureg

# Derived SI units
NEWTON = ureg.define_composite("Newton", "N", "kg m s^-2")
JOULE = ureg.define_composite("Joule", "J", "kg m^2 s^-2")
COULOMB = ureg.define_composite("Coulomb", "C", "A s")
HERTZ = ureg.define_composite("Hertz", "Hz", "s^-1")
PASCAL = ureg.define_composite("Pascal", "Pa", "N m^-2")
WATT = ureg.define_composite("Watt", "W", "J s^-1")
VOLT = ureg.define_composite("Volt", "V", "J C^-1")
FARAD = ureg.define_composite("Farad", "F", "C V^-1")
OHM = ureg.define_composite("Ohm", "Ω", "V A^-1")
SIEMENS = ureg.define_composite("Siemens", "S", "Ω^-1")
WEBER = ureg.define_composite("Weber", "Wb", "V s")
TESLA = ureg.define_composite("Tesla", "T", "Wb m^-2")
HENRY = ureg.define_composite("Henry", "H", "Wb A^-1")
GRAY = ureg.define_composite("Gray", "Gy", "J kg^-1")
LITER = ureg.define_composite("Liter", "L", "0.001 m^3")

# Physical constants
SPEED_OF_LIGHT = ureg.define_composite("Speed Of Light", "c", "299792458 m s^-1")
REDUCED_PLANCK = ureg.define_composite("Reduced Planck Constant", "ℏ", "1.054571817e-34 J s")
PLANCK = ureg.define_composite("Planck Constant", "h", "6.62607015e-34 J s")
GRAVITATION = ureg.define_composite("Gravitational Constant", "G", "6.6743015e-11 N m^2 kg^-2")
