import os
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.ticker import ScalarFormatter
from ActuatorLine.Calculations.Profile_Data import Profile_Data


def plot_profile_polars(profile: Profile_Data, save_path, alpha_start=None, alpha_stop=None):
    """
    Plot the active curve of a profile (CL, CD, CM, CN/CC vs alpha) and save
    it as '<name>_polars.png' in save_path.
    """
    alpha = profile.angle_of_attack_list(alpha_start, alpha_stop)
    cl = profile.lift_coefficient_list(alpha_start, alpha_stop)
    cd = profile.drag_coefficient_list(alpha_start, alpha_stop)
    cm = profile.moment_coefficient_list(alpha_start, alpha_stop)
    cn = profile.normal_coefficient_list(alpha_start, alpha_stop)
    cc = profile.chordwise_coefficient_list(alpha_start, alpha_stop)

    fig, axes = plt.subplots(2, 2, figsize=(12, 8))
    axes = axes.ravel()

    # 1) cl vs alpha, with stall and zero-lift markers
    axes[0].plot(alpha, cl, lw=1.5)
    axes[0].axvline(np.rad2deg(profile.static_stall_angle_rad()), color='tab:red', ls='--', label="static stall")
    axes[0].axvline(profile.zero_lift_angle_of_attack(), color='tab:gray', ls=':', label="zero lift")
    axes[0].set_xlabel('α [°]')
    axes[0].set_ylabel('Lift coefficient $C_l$')
    axes[0].set_title('$C_l$ vs. α')
    axes[0].legend()
    axes[0].grid(True)

    # 2) cd vs alpha
    axes[1].plot(alpha, cd, lw=1.5, color='C1')
    axes[1].set_xlabel('α [°]')
    axes[1].set_ylabel('Drag coefficient $C_d$')
    axes[1].set_title('$C_d$ vs. α')
    axes[1].grid(True)

    # 3) cm vs alpha
    axes[2].plot(alpha, cm, lw=1.5, color='C2')
    axes[2].set_xlabel('α [°]')
    axes[2].set_ylabel('Moment coefficient $C_m$')
    axes[2].set_title('$C_m$ vs. α')
    axes[2].grid(True)

    # 4) Cn and Cc together
    axes[3].plot(alpha, cn, label="Cn")
    axes[3].plot(alpha, cc, label="Cc")
    axes[3].set_xlabel('α [°]')
    axes[3].set_ylabel("Force Coefficient")
    axes[3].set_title("Cn and Cc vs. α")
    axes[3].legend()
    axes[3].grid(True)

    fig.suptitle(f"{profile.name} (Re = {profile.Re:.3g})")
    fig.tight_layout()
    out = os.path.join(save_path, f"{profile.name}_polars.png")
    fig.savefig(out)
    plt.close(fig)
    return out


def plot_properties_vs_Re(profile: Profile_Data, save_path):
    """
    Plot the per-Reynolds-number curve properties of a multiRe profile and
    save them as '<name>_properties_vs_Re.png'. Returns None for singleRe.
    """
    family = profile.property_family
    if family is None:
        return None

    fig, axes = plt.subplots(1, 3, figsize=(15, 4))

    axes[0].plot(family.Re, family.static_stall_angle, 'o-', label="static stall")
    axes[0].plot(family.Re, family.zero_lift_angle_of_attack, 's-', label="zero lift")
    axes[0].set_ylabel('α [°]')
    axes[0].legend()

    axes[1].plot(family.Re, family.zero_lift_drag_coeff, 'o-', color='C1', label="$C_{d,0}$")
    axes[1].plot(family.Re, family.zero_lift_moment_coeff, 's-', color='C2', label="$C_{m,0}$")
    axes[1].set_ylabel('Coefficient at zero lift')
    axes[1].legend()

    axes[2].plot(family.Re, family.normal_coeff_slope, 'o-', color='C3')
    axes[2].set_ylabel('$dC_n/dα$ [1/rad]')

    for ax in axes:
        # Force scientific notation on the Re axis
        formatter = ScalarFormatter(useMathText=True)
        formatter.set_scientific(True)
        formatter.set_powerlimits((-1, 1))
        ax.set_xlabel("Reynolds #")
        ax.xaxis.set_major_formatter(formatter)
        ax.grid(True)

    fig.tight_layout()
    out = os.path.join(save_path, f"{profile.name}_properties_vs_Re.png")
    fig.savefig(out)
    plt.close(fig)
    return out
