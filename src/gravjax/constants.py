"""
The `constants` module defines the Earth gravity-field constants used by the
predefined gravity fields, together with a few general physical constants.
"""

# Earth Constants - WGS-72
"""
Earth's gravitational parameter as defined by the WGS-72 geodetic system.
Units: *m^3/s^2*

References:

1. D. Vallado, P. Crawford, R. Hujsak, and T.S. Kelso, *Revisiting Spacetrack
Report #3*, AIAA/AAS Astrodynamics Specialist Conference, 2006, Table 2.
"""
WGS72_GM = 398600.8e9  # [m^3/s^2]

"""
Earth's equatorial radius as defined by the WGS-72 geodetic system. [m]

References:

1. D. Vallado et al., *Revisiting Spacetrack Report #3*, 2006, Table 2.
"""
WGS72_R = 6378.135e3  # [m]

"""
WGS-72 zonal harmonic coefficients J2, J3, J4. [dimensionless]

References:

1. D. Vallado et al., *Revisiting Spacetrack Report #3*, 2006, Table 2.
"""
WGS72_J2 = 0.001082616
WGS72_J3 = -0.00000253881
WGS72_J4 = -0.00000165597

# Earth Constants - WGS-84
"""
Earth's gravitational parameter as defined by the WGS-84 geodetic system.
Units: *m^3/s^2*

References:

1. D. Vallado et al., *Revisiting Spacetrack Report #3*, 2006, Table 3.
"""
WGS84_GM = 398600.4418e9  # [m^3/s^2]

"""
Earth's semi-major axis as defined by the WGS-84 geodetic system. [m]

References:

1. NIMA Technical Report TR8350.2
"""
WGS84_R = 6378.137e3  # [m] WGS-84 semi-major axis

"""
WGS-84 zonal harmonic coefficients J2, J3, J4. [dimensionless]

References:

1. D. Vallado et al., *Revisiting Spacetrack Report #3*, 2006, Table 3.
"""
WGS84_J2 = 0.00108262998905
WGS84_J3 = -0.00000253215306
WGS84_J4 = -0.00000161098761

# Default Earth values
"""
Earth's gravitational parameter used when no preset is named. WGS-84 value.
Units: *m^3/s^2*
"""
GM_EARTH = WGS84_GM

"""
Earth's equatorial radius used when no preset is named. WGS-84 value. [m]
"""
R_EARTH = WGS84_R
