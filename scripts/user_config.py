"""thermvisc User Configuration.

User-facing configuration file. Only set what should differ from the
expert defaults; a blank string or None keeps the default.

Usage:
    python scripts/run_thermvisc.py scripts/user_config.py
    python scripts/run_thermvisc.py scripts/user_config.py --decay-factor 0
"""

CONFIG = {
    # ========================================================================
    # SIGNAL CONDITIONING
    # ========================================================================
    "GAIN": 1.0,              # Scales each raw reading (calibration)
    "OFFSET": 0.0,            # Added after gain (zero-point adjustment)

    # ========================================================================
    # CURVE FITTING
    # ========================================================================
    "DECAY_FACTOR": 0.1,      # Weight of row j is exp(-DECAY_FACTOR * j)

    # ========================================================================
    # VISCOSITY LOOKUP
    # ========================================================================
    "CONDUCTIVITY": 0.1,      # Must be one of 0.1, 0.2, ..., 1.0
    "LOOKUP_POLICY": "strict",  # "strict" fails on a miss, "sentinel" reports -1.0

    # ========================================================================
    # INPUT / LOGGING
    # ========================================================================
    "SOURCE_PATH": None,      # None reads one line from stdin
    "LOG_LEVEL": "INFO",
    "LOG_FILE": None,
}
