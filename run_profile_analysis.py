import logging
import os
import numpy as np
from ActuatorLine.read_xfoil_data import load_all_polars
from ActuatorLine.Calculations.Profile_Data import Profile_Data
from ActuatorLine.plotting import plot_profile_polars, plot_properties_vs_Re


def main():
    # ======= USER SETTINGS =======
    airfoil_name = "Eppler E63"
    airfoil_path = f"airfoil_data/{airfoil_name}"
    Ncrit = 9
    Re_sweep = [5e4, 7.5e4, 1e5]
    save_path = "results"
    # =============================

    logging.basicConfig(level=logging.INFO, format='%(message)s')
    os.makedirs(save_path, exist_ok=True)

    full_df = load_all_polars(airfoil_path)
    profile = Profile_Data.from_polars(airfoil_name, full_df, Re=Re_sweep[0], Ncrit=Ncrit)
    profile.analyze()

    for Re in Re_sweep:
        profile.update_Re(Re)
        print(
            f"Re={Re:.3g} | stall={np.rad2deg(profile.static_stall_angle_rad()):.2f} deg | "
            f"alpha0={profile.zero_lift_angle_of_attack():.2f} deg | "
            f"CD0={profile.zero_lift_drag_coeff():.4f} | "
            f"CN slope={profile.normal_coeff_slope():.3f} /rad"
        )

    plot_profile_polars(profile, save_path, alpha_start=-10, alpha_stop=20)
    plot_properties_vs_Re(profile, save_path)
    profile.active_curve.to_dataframe().to_csv(
        os.path.join(save_path, f"{airfoil_name}_Re{profile.Re:.0f}_polar.csv"), index=False
    )
    print(f"Wrote plots and active polar to {save_path}")


if __name__ == "__main__":
    main()
