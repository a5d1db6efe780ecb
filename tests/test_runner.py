"""Tests for the LangGraph screening pipeline."""
import json

import pytest

from screening.errors import InvalidInputError
from screening.runner import build_screening_pipeline, run_screening, save_outputs

AD_COPY = "【目元ケア】\nヒアルロン酸※1直注入※2でクマ専用ケア\n※1保湿成分\n※2角質層まで"


class TestPipeline:
    def test_matches_direct_screening(self, screener) -> None:
        assert run_screening(AD_COPY, screener=screener) == screener.screen_document(AD_COPY)

    def test_result_content(self, screener) -> None:
        screening = run_screening(AD_COPY, screener=screener)
        assert len(screening.segments) == 4
        assert screening.result.unique_flagged_keywords == ["クマ専用", "クマ"]
        assert len(screening.result.suppressed_matches) == 2

    def test_product_is_passed_through(self, screener) -> None:
        screening = run_screening("マイクロニードルで目元ケア", product_id="HA", screener=screener)
        assert screening.product_id == "HA"
        assert "マイクロニードル" in screening.result.unique_flagged_keywords

    def test_graph_nodes(self, screener) -> None:
        app = build_screening_pipeline(screener)
        assert {"segment_text", "screen_segments", "combine_findings"} <= set(app.get_graph().nodes)

    def test_invalid_input(self, screener) -> None:
        with pytest.raises(InvalidInputError):
            run_screening("", screener=screener)


class TestSaveOutputs:
    def test_writes_json(self, screener, tmp_path) -> None:
        screening = run_screening(AD_COPY, screener=screener)
        paths = save_outputs(screening, str(tmp_path / "out"))
        assert [p.rsplit("/", 1)[-1] for p in paths] == ["segments.json", "screening.json"]

        with open(paths[0], encoding="utf-8") as f:
            segments = json.load(f)
        assert "".join(s["text"] for s in segments) == AD_COPY

        with open(paths[1], encoding="utf-8") as f:
            payload = json.load(f)
        assert payload["result"]["summary"]["by_tier"]["absolute"] == 1
        assert payload["result"]["matches"][0]["tier"] == "absolute"
