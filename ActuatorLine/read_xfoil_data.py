import logging
import re
from pathlib import Path
import pandas as pd
from ActuatorLine.errors import ConfigurationError

logger = logging.getLogger(__name__)

POLAR_COLUMNS = ['alpha', 'CL', 'CD', 'CDp', 'CM', 'Top_Xtr', 'Bot_Xtr']


def parse_polar_header(lines: list[str], file_path: str = "") -> tuple[float, float]:
    """
    Extract (Re, Ncrit) from the header lines of an XFOIL polar.
    Handles both 'Re =  0.050 e 6' and plain 'Re = 50000'.
    """
    for line in lines:
        if 'Re =' in line and 'Ncrit' in line:
            re_match = re.search(r'Re\s*=\s*([0-9\.]+)\s*e\s*(\d+)', line)
            if re_match:
                Re = float(re_match.group(1)) * 10**int(re_match.group(2))
            else:
                re_match = re.search(r'Re\s*=\s*([0-9\.]+)', line)
                Re = float(re_match.group(1)) if re_match else None

            ncrit_match = re.search(r'Ncrit\s*=\s*([0-9\.]+)', line)
            Ncrit = float(ncrit_match.group(1)) if ncrit_match else None
            if Re is not None and Ncrit is not None:
                return Re, Ncrit
            break
    raise ConfigurationError(f"Could not parse Re/Ncrit from file: {file_path}")


def load_polar(file_path: str) -> pd.DataFrame:
    """
    Read a single XFOIL polar text file.

    Returns
    -------
    pd.DataFrame
        Columns ['alpha', 'CL', 'CD', 'CM', 'Re', 'Ncrit'].
    """
    with open(file_path, 'r') as f:
        lines = f.readlines()

    Re, Ncrit = parse_polar_header(lines, file_path)

    # Table header line starts with 'alpha', followed by a dashed underline
    header_idx = next((i for i, line in enumerate(lines) if line.strip().startswith('alpha')), None)
    if header_idx is None:
        raise ConfigurationError(f"Could not find data header in file: {file_path}")

    df = pd.read_csv(
        file_path,
        sep=r"\s+",
        skiprows=header_idx + 2,
        names=POLAR_COLUMNS,
    )
    if df.empty:
        raise ConfigurationError(f"Polar file has no data rows: {file_path}")

    df = df[['alpha', 'CL', 'CD', 'CM']].astype(float)
    df['Re'] = Re
    df['Ncrit'] = Ncrit
    return df


def load_all_polars(dir_path: str) -> pd.DataFrame:
    """
    Read all .txt polar files in the given directory and concatenate into a single DataFrame.
    Unreadable files are skipped with a warning.
    """
    p = Path(dir_path)
    if not p.is_dir():
        raise ConfigurationError(f"Provided path is not a directory: {dir_path}")

    all_dfs = []
    for file in sorted(p.glob('*.txt')):
        try:
            all_dfs.append(load_polar(str(file)))
        except (ConfigurationError, ValueError, pd.errors.ParserError) as e:
            logger.warning("Skipping %s: %s", file.name, e)

    if not all_dfs:
        raise ConfigurationError(f"No valid polar files found in directory: {dir_path}")

    return pd.concat(all_dfs, ignore_index=True)
