from .loader import DoctorConfig, ConfigError, OUTPUT_FORMATS, load_config_from_path

__all__ = ["DoctorConfig", "ConfigError", "OUTPUT_FORMATS", "load_config_from_path"]
