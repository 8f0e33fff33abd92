import pytest
from ActuatorLine.errors import ConfigurationError
from ActuatorLine.config_loader import load_config, load_profiles
from ActuatorLine.Tables.Polar_Tables import Table_Type

PROFILES_YAML = """\
profiles:
  scenario:
    tableType: singleRe
    Re: 1.0e+5
    data:
      - [-5.0, -0.5, 0.02, 0.0]
      - [0.0, 0.0, 0.01, 0.0]
      - [5.0, 0.55, 0.015, -0.02]
      - [10.0, 1.0, 0.03, -0.05]
      - [15.0, 0.9, 0.08, -0.08]
  blended:
    tableType: multiRe
    Re: 1.5e5
    correctRe: on
    ReList: [1e5, 2e5]
    clData:
      - [0.0, 0.0, 0.1]
      - [5.0, 0.5, 0.7]
    cdData:
      - [0.0, 0.01, 0.008]
      - [5.0, 0.015, 0.012]
"""


def test_load_profiles(tmp_path):
    path = tmp_path / "profiles.yaml"
    path.write_text(PROFILES_YAML)
    profiles = load_profiles(str(path))

    assert set(profiles) == {"scenario", "blended"}
    assert profiles["scenario"].lift_coefficient(2.5) == pytest.approx(0.275)

    blended = profiles["blended"]
    assert blended.table_type is Table_Type.MULTI_RE
    # YAML reads 1.5e5 as a string; it is still a valid Reynolds number
    assert blended.Re == 1.5e5
    assert blended.correct_Re is True
    assert blended.lift_coefficient(5.0) == pytest.approx(0.6)


def test_profiles_without_top_level_key(tmp_path):
    path = tmp_path / "flat.yaml"
    path.write_text("foil:\n  data: [[0.0, 0.0, 0.01], [5.0, 0.5, 0.02]]\n")
    assert list(load_config(str(path))) == ["foil"]
    assert load_profiles(str(path))["foil"].lift_coefficient(2.5) == pytest.approx(0.25)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(str(tmp_path / "nope.yaml"))


def test_bad_profile_names_the_profile(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("profiles:\n  foil:\n    tableType: polyRe\n")
    with pytest.raises(ConfigurationError, match="Profile 'foil'"):
        load_profiles(str(path))


def test_empty_profiles_key_is_a_configuration_error(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("profiles:\n")
    with pytest.raises(ConfigurationError, match="'profiles'"):
        load_config(str(path))
    with pytest.raises(ConfigurationError):
        load_profiles(str(path))


def test_profiles_key_must_be_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("profiles:\n  - foil\n")
    with pytest.raises(ConfigurationError, match="mapping"):
        load_config(str(path))
