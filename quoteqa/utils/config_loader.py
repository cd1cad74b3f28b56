import logging
import os
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from quoteqa.browser.config import DEFAULT_CONFIG
from quoteqa.data import RunConfiguration

CONFIG_FILENAME = "config.yaml"


def find_config_file(args_config=None, script_dir=None):
    """Find the run configuration file.

    Args:
        args_config: path given on the command line, has highest priority
        script_dir: directory of the entry script, searched after the cwd

    Returns:
        str: path of the first configuration file found
    """
    if args_config:
        if os.path.isfile(args_config):
            logging.info(f"Using specified config file: {args_config}")
            return args_config
        raise FileNotFoundError(f"Specified config file not found: {args_config}")

    current_dir = os.getcwd()
    script_dir = script_dir or current_dir

    default_paths = [
        os.path.join(current_dir, "config", CONFIG_FILENAME),
        os.path.join(script_dir, "config", CONFIG_FILENAME),
        os.path.join(current_dir, CONFIG_FILENAME),
        os.path.join(script_dir, CONFIG_FILENAME),
        "/app/config/config.yaml",  # Docker container
    ]

    for path in default_paths:
        if os.path.isfile(path):
            logging.info(f"Auto-discovered config file: {path}")
            return path

    searched = ", ".join(default_paths)
    raise FileNotFoundError(f"Config file does not exist, searched: {searched}")


def load_yaml(path) -> Dict[str, Any]:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to read YAML {path}: {e}") from e


def build_browser_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Merge the user's browser settings over the defaults.

    Docker has no display, so headless is forced there.
    """
    browser_cfg = {**DEFAULT_CONFIG, **(cfg.get("browser_config") or {})}

    is_docker = os.getenv("DOCKER_ENV") == "true"
    if is_docker and not browser_cfg.get("headless", True):
        logging.warning("Docker environment detected, forcing headless mode")
        browser_cfg["headless"] = True
    return browser_cfg


def build_run_configuration(cfg: Dict[str, Any], env_file: Optional[str] = None) -> RunConfiguration:
    """Build the validated run configuration. Environment variables take
    priority over the config file.

    Raises:
        ValueError: no target url is configured
        pydantic.ValidationError: a section is malformed, e.g. an unknown tracer mode
    """
    load_dotenv(env_file)

    target_url = os.getenv("QUOTEQA_TARGET_URL") or (cfg.get("target") or {}).get("url", "")
    if not target_url:
        raise ValueError(
            "Target url not configured! Please set one of the following:\n"
            "   - Environment variable: QUOTEQA_TARGET_URL\n"
            "   - Config file: target.url"
        )

    tracer_cfg = dict(cfg.get("tracer") or {})
    if os.getenv("QUOTEQA_TRACER_MODE"):
        tracer_cfg["mode"] = os.getenv("QUOTEQA_TRACER_MODE").strip().lower()
    if os.getenv("QUOTEQA_TRACE_PATH"):
        tracer_cfg["path"] = os.getenv("QUOTEQA_TRACE_PATH")

    return RunConfiguration(
        target_url=target_url,
        browser_config=build_browser_config(cfg),
        tracer=tracer_cfg,
        log_level=(cfg.get("log") or {}).get("level", "info"),
        scenarios=cfg.get("scenarios") or [],
    )
