"""
Rotations between wind-axis (lift/drag) and chord-axis (normal/chordwise)
force coefficients. Angles of attack are given in degrees.
"""
import numpy as np


def convert_to_cn(cl, cd, alpha_deg):
    """Normal coefficient: CN = CL cos(a) + CD sin(a)."""
    a = np.deg2rad(alpha_deg)
    return cl * np.cos(a) + cd * np.sin(a)


def convert_to_cc(cl, cd, alpha_deg):
    """Chordwise coefficient: CC = -CL sin(a) + CD cos(a)."""
    a = np.deg2rad(alpha_deg)
    return -cl * np.sin(a) + cd * np.cos(a)


def convert_to_cl(cn, cc, alpha_deg):
    """Lift coefficient: CL = CN cos(a) - CC sin(a)."""
    a = np.deg2rad(alpha_deg)
    return cn * np.cos(a) - cc * np.sin(a)


def convert_to_cd(cn, cc, alpha_deg):
    """Drag coefficient: CD = CN sin(a) + CC cos(a)."""
    a = np.deg2rad(alpha_deg)
    return cn * np.sin(a) + cc * np.cos(a)
