import logging
import os
import yaml
from ActuatorLine.errors import ConfigurationError
from ActuatorLine.Calculations.Profile_Data import Profile_Data

logger = logging.getLogger(__name__)

# Default profile definition file
DEFAULT_CONFIG_PATH = "profiles.yaml"


def load_config(config_path=None) -> dict:
    """
    Read a YAML profile definition file.

    The file maps profile names to profile dictionaries, optionally under a
    top-level 'profiles' key::

        profiles:
          NACA0012:
            tableType: singleRe
            data:
              - [-5.0, -0.55, 0.011, 0.0]
              - ...
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not os.path.exists(config_path):
        raise ConfigurationError(f"Configuration file '{config_path}' not found.")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error reading YAML file '{config_path}': {e}") from e

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigurationError(f"'{config_path}' must contain a mapping of profile names")
    profiles = config.get("profiles", config)
    if not isinstance(profiles, dict):
        raise ConfigurationError(f"'profiles' in '{config_path}' must be a mapping of profile names")
    return profiles


def load_profiles(config_path=None) -> dict[str, Profile_Data]:
    """Build a Profile_Data for every profile defined in a YAML file."""
    definitions = load_config(config_path)
    profiles = {}
    for name, profile_dict in definitions.items():
        if not isinstance(profile_dict, dict):
            raise ConfigurationError(f"Profile '{name}': definition must be a mapping")
        profiles[str(name)] = Profile_Data.New(str(name), profile_dict)
        logger.info("Loaded profile '%s' (%s)", name, profiles[str(name)].table_type.value)
    return profiles
