"""
Sample data generator for the Water Quality Visualizer.

Writes a synthetic monitoring log: three sites sampled monthly over a
year, covering all eight known parameters.  About 5% of cells are left
blank to exercise gap handling, and the downstream site drifts out of
its safe ranges so the WQI table shows more than one tier.
"""

import datetime
import os
import random

# Per-site baseline: (mean, spread) for each parameter
_SITES = {
    'Upstream Weir': {
        'pH': (7.4, 0.2),
        'Dissolved_Oxygen_mg_L': (9.5, 0.8),
        'Temperature_C': (12.0, 4.0),
        'Turbidity_NTU': (1.5, 0.6),
        'Conductivity_uS_cm': (420.0, 60.0),
        'Nitrate_mg_L': (2.0, 0.6),
        'Phosphate_mg_L': (0.04, 0.015),
        'Coliform_CFU_100mL': (0.0, 0.0),
    },
    'Town Bridge': {
        'pH': (7.8, 0.3),
        'Dissolved_Oxygen_mg_L': (7.5, 1.0),
        'Temperature_C': (15.0, 4.5),
        'Turbidity_NTU': (3.5, 1.2),
        'Conductivity_uS_cm': (780.0, 120.0),
        'Nitrate_mg_L': (5.5, 1.5),
        'Phosphate_mg_L': (0.09, 0.03),
        'Coliform_CFU_100mL': (8.0, 5.0),
    },
    'Outfall': {
        'pH': (8.6, 0.4),
        'Dissolved_Oxygen_mg_L': (4.2, 1.2),
        'Temperature_C': (21.0, 4.0),
        'Turbidity_NTU': (7.0, 2.5),
        'Conductivity_uS_cm': (1650.0, 250.0),
        'Nitrate_mg_L': (11.5, 2.5),
        'Phosphate_mg_L': (0.25, 0.08),
        'Coliform_CFU_100mL': (60.0, 25.0),
    },
}

_DECIMALS = {
    'pH': 2,
    'Dissolved_Oxygen_mg_L': 2,
    'Temperature_C': 1,
    'Turbidity_NTU': 2,
    'Conductivity_uS_cm': 0,
    'Nitrate_mg_L': 2,
    'Phosphate_mg_L': 3,
    'Coliform_CFU_100mL': 0,
}

SAMPLE_FILENAME = 'sample-data.csv'


def generate_sample_csv(output_path: str, *, seed: int = 42, months: int = 12) -> str:
    """Write the sample dataset to *output_path* and return the path.

    Output is identical for the same *seed* and *months*.
    """
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    rng = random.Random(seed)
    columns = list(_DECIMALS)
    start = datetime.date(2024, 1, 15)

    lines = [','.join(['Date', 'Site'] + columns)]
    for month in range(months):
        year = start.year + (start.month - 1 + month) // 12
        month_no = (start.month - 1 + month) % 12 + 1
        date = start.replace(year=year, month=month_no)
        for site, baselines in _SITES.items():
            parts = [date.isoformat(), site]
            for column in columns:
                if rng.random() < 0.05:
                    parts.append('')
                    continue
                mean, spread = baselines[column]
                value = max(0.0, rng.gauss(mean, spread))
                decimals = _DECIMALS[column]
                parts.append(str(round(value)) if decimals == 0 else f"{value:.{decimals}f}")
            lines.append(','.join(parts))

    with open(output_path, 'w', encoding='utf-8', newline='') as fh:
        fh.write('\n'.join(lines) + '\n')
    return output_path


if __name__ == '__main__':
    import tempfile
    path = generate_sample_csv(os.path.join(tempfile.gettempdir(), SAMPLE_FILENAME))
    print(f"  {path} ({os.path.getsize(path):,} bytes)")
