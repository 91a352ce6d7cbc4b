"""Result JSON and components CSV."""

import cv2
import numpy as np
import pandas as pd

from board_intel.pipeline import analyze_image
from board_intel.schema.serialization import (
    CSV_COLUMNS, export_components_csv, load_result_json, write_result_json,
)


def result():
    img = np.full((200, 300, 4), 255, dtype=np.uint8)
    cv2.rectangle(img, (100, 100), (159, 114), (0, 0, 0, 255), thickness=-1)
    return analyze_image(img)


def test_json_reload_is_identical(tmp_path):
    r = result()
    path = write_result_json(r, tmp_path / "result.json")
    assert load_result_json(path) == r


def test_placeholders_are_explicit_in_json(tmp_path):
    path = write_result_json(result(), tmp_path / "result.json")
    text = path.read_text(encoding="utf-8")
    assert '"not_computed"' in text


def test_components_csv(tmp_path):
    r = result()
    df = pd.read_csv(export_components_csv(r, tmp_path / "components.csv"))
    assert list(df.columns) == CSV_COLUMNS
    assert len(df) == len(r.components) == 1
    assert df.loc[0, "type"] == "Resistor"
    assert df.loc[0, "value"] == r.components[0].properties.estimated_value
