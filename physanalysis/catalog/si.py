"""
The fixed SI-derived catalog of dimensions and plain units.

Mass is based on the gram so that every SI prefix applies uniformly;
``KILOGRAM`` is a scaled alias of ``GRAM`` and quantities built from it
are stored in grams.
"""

import math

from physanalysis.catalog.units import ureg

# Dimensions, each with its canonical unit
LENGTH = ureg.define_dimension("Length", "meter", "m")
MASS = ureg.define_dimension("Mass", "gram", "g")
TEMPERATURE = ureg.define_dimension("Temperature", "kelvin", "K")
TIME = ureg.define_dimension("Time", "second", "s")
ELECTRIC_CURRENT = ureg.define_dimension("Electric Current", "ampere", "A")
CURRENCY = ureg.define_dimension("Currency", "USD", "$")
AMOUNT_OF_SUBSTANCE = ureg.define_dimension("Amount of Substance", "mole", "mol")
ANGLE = ureg.define_dimension("Angle", "radian", "rad")

# SI base units
METER = LENGTH.base_unit
GRAM = MASS.base_unit
KELVIN = TEMPERATURE.base_unit
SECOND = TIME.base_unit
AMPERE = ELECTRIC_CURRENT.base_unit
DOLLAR = CURRENCY.base_unit
MOLE = AMOUNT_OF_SUBSTANCE.base_unit
RADIAN = ANGLE.base_unit

# Other mass units (in grams)
POUND = ureg.define_unit("Pound", "lb", MASS, 453.59237)
OUNCE = ureg.define_unit("Ounce", "oz", MASS, 28.3495231)
SHORT_TON = ureg.define_unit("US Ton", "st", MASS, 907184.74)
METRIC_TONNE = ureg.define_unit("Metric Tonne", "t", MASS, 1e6)
LONG_TON = ureg.define_unit("Imperial Ton", "lt", MASS, 1016047.203454)
SLUG = ureg.define_unit("Slug", "slug", MASS, 14593.9029)
CARAT = ureg.define_unit("Carat", "ct", MASS, 0.2)
GRAIN = ureg.define_unit("Grain", "gr", MASS, 0.0647989)
ATOMIC_MASS_UNIT = ureg.define_unit("Atomic Mass Unit", "amu", MASS, 1.660538921e-24)

KILOGRAM = ureg.define_scaled(GRAM, 1000.0)

# Other length units (in meters)
INCH = ureg.define_unit("Inch", "in", LENGTH, 0.0254)
FOOT = ureg.define_unit("Foot", "ft", LENGTH, 0.3048)
YARD = ureg.define_unit("Yard", "yd", LENGTH, 0.9144)
MILE = ureg.define_unit("Mile", "mi", LENGTH, 1609.34)
NAUTICAL_MILE = ureg.define_unit("Nautical Mile", "nmi", LENGTH, 1852.0)
ASTRONOMICAL_UNIT = ureg.define_unit("Astronomical Unit", "au", LENGTH, 149597870700.0)
LIGHT_YEAR = ureg.define_unit("Light Year", "ly", LENGTH, 9.4607304725808e15)
PARSEC = ureg.define_unit("Parsec", "pc", LENGTH, 3.09e16)

# Other temperature units (offset = reading at 0 K)
CELSIUS = ureg.define_unit("Celsius", "°C", TEMPERATURE, 1.0, -273.15)
FAHRENHEIT = ureg.define_unit("Fahrenheit", "°F", TEMPERATURE, 5.0 / 9.0, -459.67)

# Other time units (in seconds)
MINUTE = ureg.define_unit("Minute", "min", TIME, 60.0)
HOUR = ureg.define_unit("Hour", "h", TIME, 3600.0)
DAY = ureg.define_unit("Day", "d", TIME, 86400.0)
WEEK = ureg.define_unit("Week", "w", TIME, 604800.0)
YEAR = ureg.define_unit("Year", "y", TIME, 31557600.0)
DECADE = ureg.define_unit("Decade", "dec", TIME, 315576000.0)
CENTURY = ureg.define_unit("Century", "cent", TIME, 3155760000.0)
MILLENNIUM = ureg.define_unit("Millennium", "mill", TIME, 31557600000.0)

# Angle units (in radians)
DEGREE = ureg.define_unit("Degree", "deg", ANGLE, math.pi / 180.0)
