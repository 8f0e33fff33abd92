import logging
import warnings
from functools import cached_property
import numpy as np
import pandas as pd
from ActuatorLine.errors import ConfigurationError, RangeExtrapolationWarning
from ActuatorLine.Calculations.interpolation import interpolate, is_extrapolating
from ActuatorLine.Calculations.Coefficient_Transforms import convert_to_cn, convert_to_cc
from ActuatorLine.Calculations.Curve_Analysis import (
    Curve_Properties,
    Property_Family,
    analyze_curve,
    analyze_multi_re,
)
from ActuatorLine.Tables.Polar_Tables import Polar_Curve, Reynolds_Family, Table_Type
from ActuatorLine.Tables.Table_Loader import load_tables, read_scalar, read_switch

logger = logging.getLogger(__name__)


class Profile_Data:
    """
    Force and moment coefficient data for one 2-D profile.

    Holds either one polar table (tableType 'singleRe') or a family of tables
    indexed by Reynolds number ('multiRe'). Lookups use the *active curve*,
    the table in effect at the current Reynolds number, which update_Re
    replaces wholesale. In multiRe mode the active curve is built on the
    sorted union of every Re table's angles, so tables with different angle
    grids can be blended.

    Not thread-safe while update_Re runs; concurrent read-only queries are fine.

    Parameters
    ----------
    name : str
        Profile name (used in error messages).
    config : mapping
        Profile dictionary; see ActuatorLine.Tables.Table_Loader for the keys.
    tables : Polar_Curve or Reynolds_Family, optional
        Pre-built tables. When given, the table keys of config are not read.
    """
    def __init__(self, name: str, config, tables: Polar_Curve | Reynolds_Family | None = None):
        self.name = name
        self._config = dict(config)

        if tables is None:
            tables = load_tables(self._config, name)
        self.tables = tables
        self.table_type = tables.table_type

        if self.table_type is Table_Type.MULTI_RE:
            Re = read_scalar(self._config, "Re", name)
            # Blending across Re happens per angle, so all curves share one grid
            self._blend_family = tables.on_common_grid()
            self._cl_matrix = self._blend_family.coefficient_matrix("cl")
            self._cd_matrix = self._blend_family.coefficient_matrix("cd")
            self._cm_matrix = self._blend_family.coefficient_matrix("cm")
        else:
            Re = read_scalar(self._config, "Re", name, default=0.0)
        self._Re = self._check_Re(Re)
        self._ReRef = read_scalar(self._config, "ReRef", name, default=self._Re)
        self._correct_Re = read_switch(self._config, "correctRe", name, default=False)

        self._properties = None
        self._active = self._select_active_curve(self._Re)

    @classmethod
    def New(cls, name: str, config) -> "Profile_Data":
        """Named construction from a profile dictionary."""
        return cls(name, config)

    @classmethod
    def from_polars(
        cls,
        name: str,
        df: pd.DataFrame,
        Re: float,
        Ncrit: float | None = None,
        ReRef: float | None = None,
        correctRe: bool = False,
    ) -> "Profile_Data":
        """
        Build a multiRe profile from a polar DataFrame
        (see ActuatorLine.read_xfoil_data.load_all_polars).
        """
        family = Reynolds_Family.from_dataframe(df, Ncrit)
        config = {"tableType": Table_Type.MULTI_RE.value, "Re": Re, "correctRe": correctRe}
        if ReRef is not None:
            config["ReRef"] = ReRef
        return cls(name, config, tables=family)

    # ------------------------------------------------------------------
    # Active curve
    # ------------------------------------------------------------------
    def _check_Re(self, Re) -> float:
        """Reynolds numbers must be finite; multiRe tables also need Re > 0."""
        try:
            Re = float(Re)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Profile '{self.name}': Re must be a number, got {Re!r}") from e
        if not np.isfinite(Re):
            raise ConfigurationError(f"Profile '{self.name}': Re must be finite, got {Re}")
        if self.table_type is Table_Type.MULTI_RE and Re <= 0:
            raise ConfigurationError(f"Profile '{self.name}': Re must be positive, got {Re:g}")
        if Re < 0:
            raise ConfigurationError(f"Profile '{self.name}': Re must not be negative, got {Re:g}")
        return Re

    def _select_active_curve(self, Re: float) -> Polar_Curve:
        if self.table_type is Table_Type.SINGLE_RE:
            return self.tables

        Re_list = self._blend_family.Re
        if is_extrapolating(Re, Re_list):
            warnings.warn(
                f"Profile '{self.name}': Re={Re:.4g} outside table range "
                f"[{Re_list[0]:.4g}, {Re_list[-1]:.4g}]; extrapolating",
                RangeExtrapolationWarning,
                stacklevel=3,
            )

        def blend(matrix: np.ndarray) -> np.ndarray:
            # One interpolation across Re per angle of attack
            return np.array([interpolate(Re, Re_list, matrix[:, j]) for j in range(matrix.shape[1])])

        return Polar_Curve(
            self._blend_family.curves[0].alpha,
            blend(self._cl_matrix),
            blend(self._cd_matrix),
            blend(self._cm_matrix),
        )

    @cached_property
    def property_family(self) -> Property_Family | None:
        """Curve properties per Reynolds number (multiRe only), computed once."""
        if self.table_type is not Table_Type.MULTI_RE:
            return None
        logger.debug("Profile '%s': analyzing %d Reynolds numbers", self.name, len(self.tables))
        return analyze_multi_re(self.tables)

    def _select_properties(self, Re: float) -> Curve_Properties:
        if self.table_type is Table_Type.SINGLE_RE:
            return analyze_curve(self.tables)
        return self.property_family.at_Re(Re)

    def analyze(self) -> None:
        """Analyze the input data: derive stall angle, zero-lift values, etc."""
        if self._properties is not None:
            return
        self._properties = self._select_properties(self._Re)
        p = self._properties
        logger.info(
            "Profile '%s' (Re=%.4g): static stall angle %.2f deg, zero-lift AoA %.2f deg, "
            "CD0 %.4f, CM0 %.4f, CN slope %.3f /rad",
            self.name, self._Re, p.static_stall_angle, p.zero_lift_angle_of_attack,
            p.zero_lift_drag_coeff, p.zero_lift_moment_coeff, p.normal_coeff_slope,
        )

    @property
    def properties(self) -> Curve_Properties:
        self.analyze()
        return self._properties

    def update_Re(self, Re: float) -> None:
        """
        Set the Reynolds number and rebuild the active curve.

        On error the previous Reynolds number, curve and properties are kept.
        """
        Re = self._check_Re(Re)
        if Re == self._Re:
            return
        if self.table_type is Table_Type.SINGLE_RE:
            self._Re = Re
            return
        active = self._select_active_curve(Re)
        properties = self._select_properties(Re) if self._properties is not None else None
        self._Re, self._active, self._properties = Re, active, properties

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    @property
    def config(self) -> dict:
        return dict(self._config)

    @property
    def Re(self) -> float:
        return self._Re

    @property
    def ReRef(self) -> float:
        return self._ReRef

    @property
    def correct_Re(self) -> bool:
        """Indicate if Reynolds number correction is active."""
        return self._correct_Re

    @property
    def active_curve(self) -> Polar_Curve:
        return self._active

    def _lookup(self, alpha_deg: float, values: np.ndarray):
        if logger.isEnabledFor(logging.DEBUG) and is_extrapolating(alpha_deg, self._active.alpha):
            logger.debug(
                "Profile '%s': angle of attack %s deg outside table [%g, %g]; extrapolating",
                self.name, alpha_deg, self._active.alpha[0], self._active.alpha[-1],
            )
        return interpolate(alpha_deg, self._active.alpha, values)

    def lift_coefficient(self, alpha_deg: float) -> float:
        return self._lookup(alpha_deg, self._active.cl)

    def drag_coefficient(self, alpha_deg: float) -> float:
        return self._lookup(alpha_deg, self._active.cd)

    def moment_coefficient(self, alpha_deg: float) -> float:
        return self._lookup(alpha_deg, self._active.cm)

    def normal_coefficient(self, alpha_deg: float) -> float:
        return convert_to_cn(self.lift_coefficient(alpha_deg), self.drag_coefficient(alpha_deg), alpha_deg)

    def chordwise_coefficient(self, alpha_deg: float) -> float:
        return convert_to_cc(self.lift_coefficient(alpha_deg), self.drag_coefficient(alpha_deg), alpha_deg)

    def static_stall_angle_rad(self) -> float:
        return float(np.deg2rad(self.properties.static_stall_angle))

    def zero_lift_drag_coeff(self) -> float:
        return self.properties.zero_lift_drag_coeff

    def zero_lift_angle_of_attack(self) -> float:
        """Zero-lift angle of attack (deg)."""
        return self.properties.zero_lift_angle_of_attack

    def zero_lift_moment_coeff(self) -> float:
        return self.properties.zero_lift_moment_coeff

    def normal_coeff_slope(self) -> float:
        """Slope of the normal force coefficient (1/rad)."""
        return self.properties.normal_coeff_slope

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------
    def _sub_list(self, full_list: np.ndarray, alpha_start, alpha_stop) -> np.ndarray:
        """Entries of full_list with alpha in [alpha_start, alpha_stop] (copy)."""
        if alpha_start is None and alpha_stop is None:
            return np.array(full_list)
        alpha = self._active.alpha
        mask = np.ones_like(alpha, dtype=bool)
        if alpha_start is not None:
            mask &= alpha >= alpha_start
        if alpha_stop is not None:
            mask &= alpha <= alpha_stop
        return np.array(full_list[mask])

    def angle_of_attack_list(self, alpha_start=None, alpha_stop=None) -> np.ndarray:
        return self._sub_list(self._active.alpha, alpha_start, alpha_stop)

    def lift_coefficient_list(self, alpha_start=None, alpha_stop=None) -> np.ndarray:
        return self._sub_list(self._active.cl, alpha_start, alpha_stop)

    def drag_coefficient_list(self, alpha_start=None, alpha_stop=None) -> np.ndarray:
        return self._sub_list(self._active.cd, alpha_start, alpha_stop)

    def moment_coefficient_list(self, alpha_start=None, alpha_stop=None) -> np.ndarray:
        return self._sub_list(self._active.cm, alpha_start, alpha_stop)

    def normal_coefficient_list(self, alpha_start=None, alpha_stop=None) -> np.ndarray:
        return convert_to_cn(
            self.lift_coefficient_list(alpha_start, alpha_stop),
            self.drag_coefficient_list(alpha_start, alpha_stop),
            self.angle_of_attack_list(alpha_start, alpha_stop),
        )

    def chordwise_coefficient_list(self, alpha_start=None, alpha_stop=None) -> np.ndarray:
        return convert_to_cc(
            self.lift_coefficient_list(alpha_start, alpha_stop),
            self.drag_coefficient_list(alpha_start, alpha_stop),
            self.angle_of_attack_list(alpha_start, alpha_stop),
        )

    def __repr__(self) -> str:
        return f"Profile_Data(name={self.name!r}, tableType={self.table_type.value!r}, Re={self._Re:.4g})"
