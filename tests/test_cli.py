import json

from listings_eda.cli import main


def test_summary(listings_csv, capsys):
    assert main(["summary", "--csv", str(listings_csv)]) == 0
    out = capsys.readouterr().out
    assert "SUMMARY STATISTICS" in out
    assert "review_scores_factor" in out
    assert "OUTLIERS" in out


def test_corr(listings_csv, capsys):
    assert main(["corr", "--csv", str(listings_csv), "--set", "host", "--method", "spearman", "--top", "3"]) == 0
    out = capsys.readouterr().out
    assert "Set: host" in out
    assert "4 complete rows" in out
    assert "TOP 3 PAIRS" in out


def test_record(listings_csv, capsys):
    assert main(["record", "101", "--csv", str(listings_csv)]) == 0
    out = capsys.readouterr().out
    payload = json.loads(out[out.index("{"):])
    assert payload["id"] == "101"
    assert payload["price"] == 150.0
    assert payload["is_cbd"] is True
    assert payload["review_scores_factor"] == "good"
    assert payload["last_scraped"] == "2021-10-21"


def test_record_not_found(listings_csv, capsys):
    assert main(["record", "999", "--csv", str(listings_csv)]) == 1
    assert "Listing not found" in capsys.readouterr().out


def test_report(listings_csv, tmp_path):
    output = tmp_path / "report"
    assert main(["report", "--csv", str(listings_csv), "--output", str(output)]) == 0
    assert (output / "Listings_EDA.xlsx").exists()
    assert (output / "plots" / "corr_pricing.png").exists()


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()
