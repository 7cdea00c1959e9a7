import matplotlib.figure
import matplotlib.pyplot as plt
import pandas as pd
import pytest
from openpyxl import load_workbook

from listings_eda.config import CORRELATION_SETS, PAIRPLOT_SETS
from listings_eda.analytics.correlation import correlation_matrix
from listings_eda.reports.eda_report import build_report, generate_excel
from listings_eda.reports.plots import correlation_heatmap, pair_plot, write_all_plots
from listings_eda.excel.formatters import correlation_highlight
from listings_eda.excel.styles import NEGATIVE_STRONG, DIAGONAL
from listings_eda.excel.writer import ExcelWriter


def test_build_report(store):
    data = build_report(store, top_n=3)
    assert data["listings"] == 5
    assert data["review_cutoff"] == pytest.approx(4.75)
    assert set(data["correlations"]) == set(CORRELATION_SETS)
    assert data["correlations"]["pricing"]["complete_rows"] == 4
    assert len(data["top_pairs"]) == 3 * len(CORRELATION_SETS)


def test_generate_excel(store, tmp_path):
    path = generate_excel(store, tmp_path / "out" / "Listings_EDA.xlsx")
    assert path.exists()

    wb = load_workbook(path)
    assert wb.sheetnames[:3] == ["Overview", "Summary Statistics", "Levels"]
    for name in CORRELATION_SETS:
        assert f"Corr {name.title()}" in wb.sheetnames
    assert "Top Pairs" in wb.sheetnames
    assert "Outliers" in wb.sheetnames

    ws = wb["Summary Statistics"]
    assert ws.cell(row=1, column=1).value == "Column"
    labels = [ws.cell(row=r, column=1).value for r in range(2, ws.max_row + 1)]
    assert "price" in labels
    assert "id" not in labels


def test_correlation_heatmap_writes_png(cleaned, tmp_path):
    matrix, _ = correlation_matrix(cleaned, CORRELATION_SETS["property"])
    path = correlation_heatmap(matrix, tmp_path / "corr.png", title="Property")
    assert path.exists()
    assert path.read_bytes()[:4] == b"\x89PNG"


def test_write_all_plots(cleaned, tmp_path, capsys):
    written = write_all_plots(cleaned, tmp_path)
    assert "WARNING" not in capsys.readouterr().out
    assert len(written) == len(PAIRPLOT_SETS) + len(CORRELATION_SETS)
    for name in PAIRPLOT_SETS:
        assert (tmp_path / f"pairs_{name}.png").exists()
    for name in CORRELATION_SETS:
        assert (tmp_path / f"corr_{name}.png").exists()


def test_write_all_plots_continues_after_failure(cleaned, tmp_path, capsys):
    written = write_all_plots(cleaned.drop(columns=["beds"]), tmp_path)
    out = capsys.readouterr().out
    assert "WARNING" in out
    names = {p.name for p in written}
    assert "corr_host.png" in names
    assert "corr_property.png" not in names


def test_correlation_highlight_bands():
    assert correlation_highlight(0.8, 0.5) == "positive"
    assert correlation_highlight(-0.3, 0.5) == "negative_weak"
    assert correlation_highlight(0.1, 0.5) is None
    assert correlation_highlight(float("nan"), 0.5) is None


def test_write_matrix_layout():
    matrix = pd.DataFrame([[1.0, -0.7], [-0.7, 1.0]], index=["price", "beds"], columns=["price", "beds"])
    ew = ExcelWriter()
    ws = ew.add_sheet("Corr")
    next_row = ew.write_matrix(ws, 1, matrix)
    assert next_row == 4
    assert ws.cell(row=1, column=2).value == "price"
    assert ws.cell(row=3, column=1).value == "beds"
    assert ws.cell(row=3, column=2).value == -0.7
    assert ws.cell(row=3, column=2).fill.start_color.rgb.endswith(NEGATIVE_STRONG)
    assert ws.cell(row=2, column=2).fill.start_color.rgb.endswith(DIAGONAL)


def test_plots_close_figure_when_save_fails(cleaned, tmp_path, monkeypatch):
    def fail(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(matplotlib.figure.Figure, "savefig", fail)
    before = set(plt.get_fignums())
    matrix, _ = correlation_matrix(cleaned, CORRELATION_SETS["host"])
    with pytest.raises(OSError):
        correlation_heatmap(matrix, tmp_path / "corr.png")
    with pytest.raises(OSError):
        pair_plot(cleaned, PAIRPLOT_SETS["host"], tmp_path / "pairs.png", hue="room_type")
    assert set(plt.get_fignums()) == before
