import logging
import pytest
from ActuatorLine.errors import ConfigurationError
from ActuatorLine.read_xfoil_data import load_all_polars, load_polar, parse_polar_header
from ActuatorLine.Calculations.Profile_Data import Profile_Data

POLAR_TEMPLATE = """\

       XFOIL         Version 6.99

 Calculated polar for: TEST0012

 1 1 Reynolds number fixed          Mach number fixed

 xtrf =   1.000 (top)        1.000 (bottom)
 Mach =   0.000     Re =     {re_mantissa} e 6     Ncrit =   9.000

  alpha    CL        CD       CDp       CM     Top_Xtr  Bot_Xtr
 ------ -------- --------- --------- -------- -------- --------
{rows}
"""


def write_polar(path, re_mantissa, rows):
    body = "\n".join(
        f"  {a:7.3f} {cl:8.4f} {cd:9.5f} {cd / 2:9.5f} {cm:8.4f}   0.9000   0.5000"
        for a, cl, cd, cm in rows
    )
    path.write_text(POLAR_TEMPLATE.format(re_mantissa=re_mantissa, rows=body))
    return path


LOW_RE_ROWS = [(-2.0, -0.2, 0.0100, 0.0), (0.0, 0.0, 0.0090, 0.0), (2.0, 0.22, 0.0095, -0.01)]
HIGH_RE_ROWS = [(-2.0, -0.1, 0.0080, 0.0), (0.0, 0.1, 0.0070, -0.01), (2.0, 0.3, 0.0075, -0.02)]


def test_parse_header_variants():
    assert parse_polar_header([" Mach = 0.000  Re = 0.050 e 6  Ncrit = 9.000"]) == pytest.approx((5e4, 9.0))
    assert parse_polar_header([" Mach = 0.000  Re = 50000  Ncrit = 5.000"]) == pytest.approx((5e4, 5.0))
    with pytest.raises(ConfigurationError):
        parse_polar_header(["no header here"], "bad.txt")


def test_load_polar_keeps_moment(tmp_path):
    df = load_polar(str(write_polar(tmp_path / "low.txt", "0.100", LOW_RE_ROWS)))
    assert list(df.columns) == ["alpha", "CL", "CD", "CM", "Re", "Ncrit"]
    assert len(df) == 3
    assert df["Re"].iloc[0] == pytest.approx(1e5)
    assert df["Ncrit"].iloc[0] == 9.0
    assert df["CM"].tolist() == pytest.approx([0.0, 0.0, -0.01])


def test_load_all_polars_skips_bad_files(tmp_path, caplog):
    write_polar(tmp_path / "low.txt", "0.100", LOW_RE_ROWS)
    write_polar(tmp_path / "high.txt", "0.200", HIGH_RE_ROWS)
    (tmp_path / "junk.txt").write_text("not a polar\n")
    with caplog.at_level(logging.WARNING):
        df = load_all_polars(str(tmp_path))
    assert "junk.txt" in caplog.text
    assert sorted(df["Re"].unique()) == pytest.approx([1e5, 2e5])
    assert len(df) == 6


def test_load_all_polars_errors(tmp_path):
    with pytest.raises(ConfigurationError, match="not a directory"):
        load_all_polars(str(tmp_path / "missing"))
    with pytest.raises(ConfigurationError, match="No valid polar files"):
        load_all_polars(str(tmp_path))


def test_profile_from_loaded_polars(tmp_path):
    write_polar(tmp_path / "low.txt", "0.100", LOW_RE_ROWS)
    write_polar(tmp_path / "high.txt", "0.200", HIGH_RE_ROWS)
    profile = Profile_Data.from_polars("TEST0012", load_all_polars(str(tmp_path)), Re=1.5e5, Ncrit=9.0)
    assert profile.lift_coefficient(0.0) == pytest.approx(0.05)
    assert profile.moment_coefficient(2.0) == pytest.approx(-0.015)
