from .config_loader import build_run_configuration, find_config_file, load_yaml
from .get_log import GetLog

__all__ = ["GetLog", "find_config_file", "load_yaml", "build_run_configuration"]
