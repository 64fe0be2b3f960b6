"""
Surface Helper configuration.
"""

# Default plugin settings (see surface_helper.settings)
SURFACE_HELPER_DEFAULTS = {
    "ship_distance_1": 1750,          # First warning (m), 0 - off
    "ship_distance_2": 1900,          # Second warning (m), 0 - off
    "overlay_enabled": True,
    "ship_center_offset": 0.0,        # -1 cockpit, 0 middle, +1 exit point
    "log_file": "SurfaceHelper.log",
    "touchdown_welcome": False,
    "approach_welcome": True,
    "sc_exit_welcome": False,
    "high_gravity_g": 2.0,
    "high_temperature_k": 800.0,
    "temperature_scale": 1,           # 0 - K, 1 - C, 2 - F
    "temperature_scale_name": True,
}

# Logging configuration
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

# Demo excursion (main.py)
DEMO_CONFIG = {
    "planet_radius_m": 1_500_000.0,
    "landing_lat": 10.0,
    "landing_lon": 20.0,
    "walk_step_m": 150.0,
    "walk_steps": 16,
}
