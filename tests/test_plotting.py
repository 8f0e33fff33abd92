import matplotlib
matplotlib.use("Agg")
import os
from ActuatorLine.Calculations.Profile_Data import Profile_Data
from ActuatorLine.plotting import plot_profile_polars, plot_properties_vs_Re


def test_plot_profile_polars(tmp_path, scenario_config):
    profile = Profile_Data("scenario", scenario_config)
    out = plot_profile_polars(profile, str(tmp_path), alpha_start=-5, alpha_stop=15)
    assert os.path.isfile(out)
    assert out.endswith("scenario_polars.png")


def test_plot_properties_vs_re(tmp_path, multi_config, scenario_config):
    out = plot_properties_vs_Re(Profile_Data("multi", multi_config), str(tmp_path))
    assert os.path.isfile(out)
    assert plot_properties_vs_Re(Profile_Data("scenario", scenario_config), str(tmp_path)) is None
