import logging
from dataclasses import dataclass, fields
import numpy as np
from scipy.stats import linregress
from ActuatorLine.Calculations.interpolation import interpolate
from ActuatorLine.Calculations.Coefficient_Transforms import convert_to_cn
from ActuatorLine.Tables.Polar_Tables import Polar_Curve, Reynolds_Family, _frozen_array

logger = logging.getLogger(__name__)

# Window (deg, relative to the zero-lift angle) used to fit the normal coefficient slope
NORMAL_SLOPE_WINDOW = (-2.0, 6.0)


@dataclass(frozen=True)
class Curve_Properties:
    """Scalar shape properties of one polar curve. Angles in degrees."""
    static_stall_angle: float
    zero_lift_drag_coeff: float
    zero_lift_angle_of_attack: float
    zero_lift_moment_coeff: float
    normal_coeff_slope: float


def calc_static_stall_angle(curve: Polar_Curve) -> float:
    """
    Angle (deg) beyond which lift stops increasing on the positive-angle branch.

    Scans samples with alpha >= 0 from low to high angle and returns the first
    one whose successor has equal or lower lift, so a plateau stalls at its
    first sample. If lift keeps increasing the last sample is returned. With
    no positive-angle samples the first global maximum of lift is used.
    """
    alpha, cl = curve.alpha, curve.cl
    positive = np.nonzero(alpha >= 0.0)[0]
    if len(positive) == 0:
        return float(alpha[np.argmax(cl)])

    for i in positive[:-1]:
        if cl[i + 1] <= cl[i]:
            return float(alpha[i])
    return float(alpha[positive[-1]])


def calc_zero_lift_angle_of_attack(curve: Polar_Curve) -> float:
    """
    Angle (deg) at which lift crosses zero.

    Every interval where lift changes sign (or touches zero) is a candidate;
    the crossing nearest to 0 deg wins. Without any crossing, lift is
    extrapolated to zero through the segment bracketing 0 deg.
    """
    alpha, cl = curve.alpha, curve.cl

    exact = alpha[cl == 0.0]
    crossings = list(exact)
    for i in range(len(alpha) - 1):
        if cl[i] * cl[i + 1] < 0:
            crossings.append(alpha[i] - cl[i] * (alpha[i + 1] - alpha[i]) / (cl[i + 1] - cl[i]))
    if crossings:
        crossings = np.array(crossings, dtype=float)
        return float(crossings[np.argmin(np.abs(crossings))])

    if len(alpha) < 2:
        logger.warning("Single-point polar with nonzero lift; zero-lift angle taken as %g deg", alpha[0])
        return float(alpha[0])

    i = int(np.clip(np.searchsorted(alpha, 0.0, side="right") - 1, 0, len(alpha) - 2))
    if cl[i + 1] == cl[i]:
        logger.warning("Lift is flat around 0 deg and never crosses zero; zero-lift angle taken as 0 deg")
        return 0.0
    alpha0 = alpha[i] - cl[i] * (alpha[i + 1] - alpha[i]) / (cl[i + 1] - cl[i])
    logger.warning("Lift never crosses zero; extrapolated zero-lift angle %.3f deg", alpha0)
    return float(alpha0)


def calc_zero_lift_drag_coeff(curve: Polar_Curve, zero_lift_alpha: float) -> float:
    return interpolate(zero_lift_alpha, curve.alpha, curve.cd)


def calc_zero_lift_moment_coeff(curve: Polar_Curve, zero_lift_alpha: float) -> float:
    return interpolate(zero_lift_alpha, curve.alpha, curve.cm)


def calc_normal_coeff_slope(curve: Polar_Curve, zero_lift_alpha: float) -> float:
    """
    Slope of the normal force coefficient (1/rad) in its linear region.

    Least-squares line through CN(alpha) for the samples within
    NORMAL_SLOPE_WINDOW of the zero-lift angle. With fewer than two samples
    in the window the two samples nearest to the zero-lift angle are used.
    """
    alpha = curve.alpha
    if len(alpha) < 2:
        return 0.0

    lo, hi = zero_lift_alpha + NORMAL_SLOPE_WINDOW[0], zero_lift_alpha + NORMAL_SLOPE_WINDOW[1]
    idx = np.nonzero((alpha >= lo) & (alpha <= hi))[0]
    if len(idx) < 2:
        idx = np.sort(np.argsort(np.abs(alpha - zero_lift_alpha), kind="stable")[:2])

    cn = convert_to_cn(curve.cl[idx], curve.cd[idx], alpha[idx])
    fit = linregress(np.deg2rad(alpha[idx]), cn)
    return float(fit.slope)


def analyze_curve(curve: Polar_Curve) -> Curve_Properties:
    """Compute every shape property of one curve."""
    alpha0 = calc_zero_lift_angle_of_attack(curve)
    return Curve_Properties(
        static_stall_angle=calc_static_stall_angle(curve),
        zero_lift_drag_coeff=calc_zero_lift_drag_coeff(curve, alpha0),
        zero_lift_angle_of_attack=alpha0,
        zero_lift_moment_coeff=calc_zero_lift_moment_coeff(curve, alpha0),
        normal_coeff_slope=calc_normal_coeff_slope(curve, alpha0),
    )


@dataclass(frozen=True, eq=False)
class Property_Family:
    """
    Curve properties for every Reynolds number of a family.

    Each array is index-aligned with Re and read-only.
    """
    Re: np.ndarray
    static_stall_angle: np.ndarray
    zero_lift_drag_coeff: np.ndarray
    zero_lift_angle_of_attack: np.ndarray
    zero_lift_moment_coeff: np.ndarray
    normal_coeff_slope: np.ndarray

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, _frozen_array(getattr(self, f.name), f.name))

    def at_Re(self, Re: float) -> Curve_Properties:
        """Interpolate every property across Reynolds number."""
        return Curve_Properties(**{
            f.name: interpolate(Re, self.Re, getattr(self, f.name))
            for f in fields(Curve_Properties)
        })


def analyze_multi_re(family: Reynolds_Family) -> Property_Family:
    """Run analyze_curve on each Reynolds number's own curve."""
    props = [analyze_curve(curve) for curve in family.curves]
    for Re, p in zip(family.Re, props):
        logger.debug(
            "Re=%.4g: stall %.2f deg, alpha0 %.2f deg, CD0 %.4f, CM0 %.4f, CN slope %.3f /rad",
            Re, p.static_stall_angle, p.zero_lift_angle_of_attack,
            p.zero_lift_drag_coeff, p.zero_lift_moment_coeff, p.normal_coeff_slope,
        )
    return Property_Family(
        Re=np.array(family.Re, dtype=float),
        **{
            f.name: np.array([getattr(p, f.name) for p in props], dtype=float)
            for f in fields(Curve_Properties)
        },
    )
