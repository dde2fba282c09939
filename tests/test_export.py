from unittest.mock import patch

import pandas as pd
import pytest
import requests

from cozo_client import QueryClient, export_script_results
from http_helpers import make_response

POST = "cozo_client.db.text_query_client.requests.post"


def _dispatch(url, headers=None, json=None):
    script = json["script"]
    if script.startswith("fail"):
        return make_response(500, text="eval error")
    if script.startswith("down"):
        raise requests.ConnectionError("connection refused")
    return make_response(200, {"rows": [[1, "a"], [2, "b"]], "headers": ["id", "name"]})


@patch(POST, side_effect=_dispatch)
def test_export_writes_csv_and_reports_failures(mock_post, tmp_path):
    scripts = tmp_path / "scripts"
    scripts.mkdir()
    (scripts / "01_users.cozo").write_text("?[id, name] := *users{id, name}", encoding="utf-8")
    (scripts / "02_broken.cozo").write_text("fail here", encoding="utf-8")
    (scripts / "03_offline.cozo").write_text("down", encoding="utf-8")
    out = tmp_path / "out"

    summary = export_script_results(QueryClient(), scripts, output_dir=out)

    assert summary == {
        "total": 3,
        "success": ["01_users.cozo"],
        "failed": ["02_broken.cozo", "03_offline.cozo"],
    }
    assert mock_post.call_count == 3
    df = pd.read_csv(out / "01_users_res.csv")
    assert list(df.columns) == ["id", "name"]
    assert df["id"].tolist() == [1, 2]
    assert not (out / "02_broken_res.csv").exists()


@patch(POST, side_effect=_dispatch)
def test_export_defaults_to_script_dir(mock_post, tmp_path):
    (tmp_path / "q.cozo").write_text("?[id, name] <- [[1, 'a']]", encoding="utf-8")
    summary = export_script_results(QueryClient(), tmp_path)
    assert summary["success"] == ["q.cozo"]
    assert (tmp_path / "q_res.csv").exists()


@patch(POST)
def test_export_empty_dir(mock_post, tmp_path):
    summary = export_script_results(QueryClient(), tmp_path)
    assert summary == {"total": 0, "success": [], "failed": []}
    mock_post.assert_not_called()


def test_export_missing_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        export_script_results(QueryClient(), tmp_path / "missing")
