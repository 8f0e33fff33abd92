import pytest

# Reference polar: lift crosses zero exactly at 0 deg and peaks at 10 deg
SCENARIO_ROWS = [
    [-5.0, -0.5, 0.02, 0.0],
    [0.0, 0.0, 0.01, 0.0],
    [5.0, 0.55, 0.015, -0.02],
    [10.0, 1.0, 0.03, -0.05],
    [15.0, 0.9, 0.08, -0.08],
]


@pytest.fixture
def scenario_config():
    return {"tableType": "singleRe", "Re": 1e5, "data": [list(r) for r in SCENARIO_ROWS]}


@pytest.fixture
def multi_config():
    """Two Reynolds numbers sharing one angle axis."""
    return {
        "tableType": "multiRe",
        "Re": 1.5e5,
        "ReRef": 1e5,
        "correctRe": True,
        "ReList": [1e5, 2e5],
        "clData": [
            [-5.0, -0.5, -0.6],
            [0.0, 0.0, 0.1],
            [5.0, 0.5, 0.7],
            [10.0, 0.9, 1.2],
            [15.0, 0.8, 1.0],
        ],
        "cdData": [
            [-5.0, 0.02, 0.018],
            [0.0, 0.01, 0.008],
            [5.0, 0.015, 0.012],
            [10.0, 0.03, 0.024],
            [15.0, 0.08, 0.06],
        ],
        "cmData": [
            [-5.0, 0.0, 0.01],
            [0.0, 0.0, -0.01],
            [5.0, -0.02, -0.03],
            [10.0, -0.05, -0.06],
            [15.0, -0.08, -0.09],
        ],
    }
