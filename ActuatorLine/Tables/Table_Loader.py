"""
Read profile coefficient tables from a profile's configuration dictionary.

Single Reynolds number::

    {"tableType": "singleRe",
     "data": [[alpha, CL, CD, CM], ...]}

Multiple Reynolds numbers (rows = angles, column 0 = alpha, one further
column per entry of ReList)::

    {"tableType": "multiRe",
     "Re": 1.5e5,
     "ReList": [1e5, 2e5],
     "clData": [[alpha, CL@1e5, CL@2e5], ...],
     "cdData": [...],
     "cmData": [...]}          # optional
"""
import logging
import numpy as np
from ActuatorLine.errors import ConfigurationError
from ActuatorLine.Tables.Polar_Tables import Polar_Curve, Reynolds_Family, Table_Type

logger = logging.getLogger(__name__)

_REQUIRED = object()


def lookup(config, key: str, name: str, default=_REQUIRED):
    """Dictionary lookup that reports the profile and key when missing."""
    if key in config:
        return config[key]
    if default is _REQUIRED:
        raise ConfigurationError(f"Profile '{name}': required key '{key}' not found")
    return default


def read_scalar(config, key: str, name: str, default=_REQUIRED) -> float:
    """
    Read a float. Strings are accepted since YAML loads values such as
    1e5 (no decimal point) as str.
    """
    value = lookup(config, key, name, default)
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Profile '{name}': '{key}' must be a number, got {value!r}") from e


def read_switch(config, key: str, name: str, default: bool = False) -> bool:
    value = lookup(config, key, name, default)
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, str):
        # OpenFOAM-style switch words
        word = value.strip().lower()
        if word in ("on", "yes", "true", "y", "t"):
            return True
        if word in ("off", "no", "false", "n", "f", "none"):
            return False
    if isinstance(value, (int, np.integer)) and value in (0, 1):
        return bool(value)
    raise ConfigurationError(f"Profile '{name}': '{key}' must be a switch, got {value!r}")


def read_single_re(config, name: str) -> Polar_Curve:
    """Read the (alpha, CL, CD[, CM]) rows under 'data'."""
    rows = lookup(config, "data", name)
    try:
        return Polar_Curve.from_rows(rows)
    except ConfigurationError as e:
        raise ConfigurationError(f"Profile '{name}': 'data': {e}") from e


def _read_rows(config, keyword: str, name: str) -> np.ndarray:
    rows = lookup(config, keyword, name)
    try:
        data = np.array(rows, dtype=float)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"Profile '{name}': '{keyword}' must be a numeric 2-D array with rows of equal length"
        ) from e
    if data.ndim != 2 or data.shape[0] == 0:
        raise ConfigurationError(
            f"Profile '{name}': '{keyword}' must be a non-empty 2-D array, got shape {data.shape}"
        )
    return data


def read_angle_of_attack_list(config, keyword: str, name: str) -> np.ndarray:
    """Angle of attack axis (deg): first column of a 2-D array."""
    return _read_rows(config, keyword, name)[:, 0]


def read_2d_array(config, keyword: str, name: str, alpha: np.ndarray, n_Re: int) -> list[np.ndarray]:
    """
    Read a 2-D coefficient array given as data[alpha][Re] with the angle of
    attack in the first column, and transpose it to one list per Re.

    Returns
    -------
    list of np.ndarray
        n_Re arrays, each of length len(alpha).
    """
    data = _read_rows(config, keyword, name)
    if data.shape[0] != len(alpha):
        raise ConfigurationError(
            f"Profile '{name}': '{keyword}' has {data.shape[0]} rows but the angle "
            f"of attack axis has {len(alpha)}"
        )
    if data.shape[1] != n_Re + 1:
        raise ConfigurationError(
            f"Profile '{name}': '{keyword}' has {data.shape[1] - 1} coefficient columns "
            f"but ReList has {n_Re} entries"
        )
    if not np.array_equal(data[:, 0], alpha):
        raise ConfigurationError(
            f"Profile '{name}': angle of attack column of '{keyword}' differs from 'clData'"
        )
    return [data[:, j] for j in range(1, n_Re + 1)]


def read_multi_re(config, name: str) -> Reynolds_Family:
    """Read ReList and the clData/cdData[/cmData] arrays."""
    try:
        Re_list = np.array(lookup(config, "ReList", name), dtype=float).ravel()
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Profile '{name}': 'ReList' must be a list of numbers") from e
    if len(Re_list) < 2:
        raise ConfigurationError(
            f"Profile '{name}': multiRe tables need at least two Reynolds numbers, "
            f"got {len(Re_list)}"
        )

    alpha = read_angle_of_attack_list(config, "clData", name)
    n_Re = len(Re_list)
    cl_lists = read_2d_array(config, "clData", name, alpha, n_Re)
    cd_lists = read_2d_array(config, "cdData", name, alpha, n_Re)
    if "cmData" in config:
        cm_lists = read_2d_array(config, "cmData", name, alpha, n_Re)
    else:
        logger.debug("Profile '%s': no cmData, moment coefficients set to zero", name)
        cm_lists = [None] * n_Re

    try:
        curves = tuple(
            Polar_Curve(alpha, cl, cd, cm) for cl, cd, cm in zip(cl_lists, cd_lists, cm_lists)
        )
        return Reynolds_Family(Re_list, curves)
    except ConfigurationError as e:
        raise ConfigurationError(f"Profile '{name}': {e}") from e


def load_tables(config, name: str):
    """
    Read the tables for the profile's tableType.

    Returns
    -------
    Polar_Curve or Reynolds_Family
    """
    table_type = Table_Type.parse(config.get("tableType", Table_Type.SINGLE_RE.value), name)
    if table_type is Table_Type.SINGLE_RE:
        return read_single_re(config, name)
    return read_multi_re(config, name)
