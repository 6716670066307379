import matplotlib
matplotlib.use('Agg')

import pytest

from wq_visualizer.schema import build_dataset


SAMPLE_CSV = """Date,Site,pH,Turbidity_NTU,Coliform_CFU_100mL,Notes
2024-01-02,A,7.0,1.5,0,clear
2024-01-01,B,8.0,5.0,12,
2024-01-02,A,7.5,,0,windy
2024-01-03,B,8.4,4.0,20,
"""


@pytest.fixture
def sample_csv_text():
    return SAMPLE_CSV


@pytest.fixture
def sample_rows():
    return [
        {'Date': '2024-01-02', 'Site': 'A', 'pH': 7.0, 'Turbidity_NTU': 1.5},
        {'Date': '2024-01-01', 'Site': 'B', 'pH': 8.0, 'Turbidity_NTU': 5.0},
        {'Date': '2024-01-02', 'Site': 'A', 'pH': 7.5, 'Turbidity_NTU': None},
        {'Date': '2024-01-03', 'Site': 'B', 'pH': 8.4, 'Turbidity_NTU': 4.0},
    ]


@pytest.fixture
def sample_dataset(sample_rows):
    return build_dataset(
        sample_rows, ['Date', 'Site', 'pH', 'Turbidity_NTU'],
        source_name='sample.csv',
    )
