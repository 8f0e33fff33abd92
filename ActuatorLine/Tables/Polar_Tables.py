from dataclasses import dataclass, field
from enum import Enum
import numpy as np
import pandas as pd
from ActuatorLine.errors import ConfigurationError
from ActuatorLine.Calculations.interpolation import interpolate, union_grid


COEFFICIENTS = ("cl", "cd", "cm")


class Table_Type(Enum):
    """How a profile's coefficients are tabulated."""
    SINGLE_RE = "singleRe"
    MULTI_RE = "multiRe"

    @classmethod
    def parse(cls, value, name: str = "") -> "Table_Type":
        if isinstance(value, cls):
            return value
        for table_type in cls:
            if table_type.value == value:
                return table_type
        valid = ", ".join(t.value for t in cls)
        raise ConfigurationError(
            f"Profile '{name}': unknown tableType '{value}' (expected one of: {valid})"
        )


def _frozen_array(values, label: str) -> np.ndarray:
    try:
        arr = np.array(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{label} must be numeric: {e}") from e
    if arr.ndim != 1:
        raise ConfigurationError(f"{label} must be a 1D list, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ConfigurationError(f"{label} contains non-finite values")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Polar_Curve:
    """
    One (alpha, CL, CD, CM) table for a single Reynolds number.

    alpha is in degrees and strictly increasing. Arrays are read-only; the
    curve is never modified after it is built.
    """
    alpha: np.ndarray
    cl: np.ndarray
    cd: np.ndarray
    cm: np.ndarray = None

    table_type = Table_Type.SINGLE_RE

    def __post_init__(self):
        alpha = _frozen_array(self.alpha, "alpha")
        if len(alpha) == 0:
            raise ConfigurationError("A polar table needs at least one row")
        if np.any(np.diff(alpha) <= 0):
            raise ConfigurationError("alpha must be strictly increasing")
        cm = np.zeros_like(alpha) if self.cm is None else self.cm
        object.__setattr__(self, "alpha", alpha)
        for label, values in zip(COEFFICIENTS, (self.cl, self.cd, cm)):
            arr = _frozen_array(values, label)
            if len(arr) != len(alpha):
                raise ConfigurationError(
                    f"{label} has {len(arr)} values but alpha has {len(alpha)}"
                )
            object.__setattr__(self, label, arr)

    def __len__(self) -> int:
        return len(self.alpha)

    @classmethod
    def from_rows(cls, rows) -> "Polar_Curve":
        """
        Build from rows of (alpha, CL, CD) or (alpha, CL, CD, CM).
        Missing CM is taken as zero.
        """
        try:
            data = np.array(rows, dtype=float)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Polar rows must be numeric and of equal length: {e}") from e
        if data.ndim != 2 or data.shape[1] not in (3, 4):
            raise ConfigurationError(
                f"Polar rows must have 3 (alpha, CL, CD) or 4 (alpha, CL, CD, CM) columns, "
                f"got shape {data.shape}"
            )
        cm = data[:, 3] if data.shape[1] == 4 else None
        return cls(data[:, 0], data[:, 1], data[:, 2], cm)

    def resample(self, alpha) -> "Polar_Curve":
        """Re-evaluate every coefficient on another angle grid."""
        alpha = np.asarray(alpha, dtype=float)
        return Polar_Curve(
            alpha,
            interpolate(alpha, self.alpha, self.cl),
            interpolate(alpha, self.alpha, self.cd),
            interpolate(alpha, self.alpha, self.cm),
        )

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame({"alpha": self.alpha, "CL": self.cl, "CD": self.cd, "CM": self.cm})


@dataclass(frozen=True, eq=False)
class Reynolds_Family:
    """
    Polar curves indexed by Reynolds number.

    Re is strictly increasing and curves[i] belongs to Re[i]. Each curve keeps
    its own angle grid; use on_common_grid() before blending across Re.
    """
    Re: np.ndarray
    curves: tuple = field(default_factory=tuple)

    table_type = Table_Type.MULTI_RE

    def __post_init__(self):
        Re = _frozen_array(self.Re, "ReList")
        curves = tuple(self.curves)
        if len(Re) == 0:
            raise ConfigurationError("ReList must hold at least one Reynolds number")
        if np.any(Re <= 0):
            raise ConfigurationError("Reynolds numbers must be positive")
        if np.any(np.diff(Re) <= 0):
            raise ConfigurationError("ReList must be strictly increasing")
        if len(curves) != len(Re):
            raise ConfigurationError(
                f"{len(Re)} Reynolds numbers but {len(curves)} polar curves"
            )
        object.__setattr__(self, "Re", Re)
        object.__setattr__(self, "curves", curves)

    def __len__(self) -> int:
        return len(self.Re)

    def common_alpha(self) -> np.ndarray:
        """Sorted union of the angle grids of every Reynolds number."""
        return union_grid(*(c.alpha for c in self.curves))

    def has_common_grid(self) -> bool:
        first = self.curves[0].alpha
        return all(np.array_equal(c.alpha, first) for c in self.curves[1:])

    def on_common_grid(self) -> "Reynolds_Family":
        """
        Family with every curve resampled onto common_alpha().

        Angles a given Re table does not cover are extrapolated from its edge
        segments.
        """
        if self.has_common_grid():
            return self
        alpha = self.common_alpha()
        return Reynolds_Family(self.Re, tuple(c.resample(alpha) for c in self.curves))

    def coefficient_matrix(self, kind: str) -> np.ndarray:
        """
        Array of shape (n_Re, n_alpha) of one coefficient ('cl', 'cd', 'cm').
        Requires a common angle grid.
        """
        if kind not in COEFFICIENTS:
            raise ValueError(f"kind must be one of {COEFFICIENTS}")
        if not self.has_common_grid():
            raise ValueError("Curves do not share an angle grid; call on_common_grid() first")
        return np.vstack([getattr(c, kind) for c in self.curves])

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, Ncrit: float | None = None) -> "Reynolds_Family":
        """
        Group a polar DataFrame by Reynolds number.

        Expects columns ['Re', 'alpha', 'CL', 'CD'] and optionally 'CM' and
        'Ncrit'. Each Re slice is sorted by alpha and duplicate angles are
        dropped (XFOIL repeats points after convergence restarts).
        """
        missing = {"Re", "alpha", "CL", "CD"} - set(df.columns)
        if missing:
            raise ConfigurationError(f"Polar data is missing columns: {sorted(missing)}")

        if Ncrit is not None:
            if "Ncrit" not in df.columns:
                raise ConfigurationError("Polar data has no 'Ncrit' column to filter on")
            df = df[df["Ncrit"] == Ncrit]
        if df.empty:
            raise ConfigurationError(f"No polar data for Ncrit={Ncrit}")

        Res = []
        curves = []
        for Re, subset in df.groupby("Re", sort=True):
            subset = subset.sort_values("alpha", kind="stable").drop_duplicates("alpha", keep="first")
            cm = subset["CM"].to_numpy() if "CM" in subset.columns else None
            curves.append(Polar_Curve(
                subset["alpha"].to_numpy(),
                subset["CL"].to_numpy(),
                subset["CD"].to_numpy(),
                cm,
            ))
            Res.append(float(Re))
        return cls(np.array(Res), tuple(curves))
