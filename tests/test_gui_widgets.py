import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from wq_visualizer.data_model import ChartSelection, ParameterMeta, SiteScore
from wq_visualizer.gui_config_panel import ConfigPanel
from wq_visualizer.gui_views import SummaryView


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication([])


def test_reload_replaces_tier_badges(qapp):
    view = SummaryView()
    view.show_scores([SiteScore('A', 2, 89, 'Good', 'good')])
    assert view._tbl_wqi.cellWidget(0, 2).text() == '89 – Good'

    view.show_scores([SiteScore('B', 1, None, None)])
    assert view._tbl_wqi.rowCount() == 1
    assert view._tbl_wqi.cellWidget(0, 2) is None
    assert view._tbl_wqi.item(0, 2).text() == '—'
    assert view._tbl_wqi.item(0, 0).text() == 'B'


def test_hidden_scores_section(qapp):
    view = SummaryView()
    view.show_scores(None)
    assert view._grp_wqi.isHidden()


def test_config_panel_uses_given_parameter_table(qapp, sample_dataset):
    table = {'pH': ParameterMeta('Acidity', 'units', (6.0, 9.0))}
    panel = ConfigPanel()
    panel.set_dataset(
        sample_dataset, ChartSelection('Date', ('pH',), 'Site'), table,
    )

    tooltip = panel._param_checks['pH'].toolTip()
    assert tooltip.startswith('Acidity (units)')
    assert '6 to 9' in tooltip
    # Turbidity is not in the custom table, so it gets no tooltip
    assert panel._param_checks['Turbidity_NTU'].toolTip() == ''

    selection = panel.get_selection()
    assert selection.x_column == 'Date'
    assert selection.value_columns == ('pH',)
    assert selection.group_column == 'Site'
