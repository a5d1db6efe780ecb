"""Tests for screening.annotations."""
from models.screening_output import AnnotationAnalysis, AnnotationScope
from screening.annotations import (
    analyze,
    find_footnotes,
    find_marker_occurrences,
    format_annotation_analysis,
    keyword_candidate,
    marker_at,
    normalize_marker,
)

ANNOTATED = "ヒアルロン酸※1直注入※2で目元ケア ※1保湿成分 ※2角質層まで"


class TestMarkers:
    def test_normalize_full_width_digits(self) -> None:
        assert normalize_marker("※", "１") == "※1"
        assert normalize_marker("＊", "2") == "*2"

    def test_bare_reference_mark(self) -> None:
        assert normalize_marker("※", "") == "※"

    def test_word_marker_needs_numeral(self) -> None:
        assert normalize_marker("注", "") is None
        assert normalize_marker("*", "") is None

    def test_marker_at(self) -> None:
        span = marker_at("注入※2で", 2)
        assert span is not None
        assert span.marker == "※2"
        assert (span.start, span.end) == (2, 4)
        assert marker_at("注入で", 2) is None

    def test_keyword_candidate_is_single_script(self) -> None:
        assert keyword_candidate("ヒアルロン酸", 6) == (5, "酸")
        assert keyword_candidate("1直注入", 4) == (1, "直注入")
        assert keyword_candidate("ケア ", 3) is None


class TestMarkerOccurrences:
    def test_annotated_copy(self) -> None:
        occurrences = find_marker_occurrences(ANNOTATED)
        assert [(o.keyword, o.marker, o.position) for o in occurrences] == [
            ("酸", "※1", 5),
            ("直注入", "※2", 8),
        ]

    def test_footnote_heads_are_not_occurrences(self) -> None:
        assert find_marker_occurrences(" ※1保湿成分") == []

    def test_katakana_with_long_vowel(self) -> None:
        occurrences = find_marker_occurrences("コラーゲン※1とセラミド※1を配合")
        assert [o.keyword for o in occurrences] == ["コラーゲン", "セラミド"]


class TestFootnotes:
    def test_whitespace_led(self) -> None:
        footnotes = find_footnotes(ANNOTATED)
        assert [(f.marker, f.footnote_text) for f in footnotes] == [("※1", "保湿成分"), ("※2", "角質層まで")]
        assert all(f.scope is AnnotationScope.SEGMENT for f in footnotes)

    def test_bracketed(self) -> None:
        footnotes = find_footnotes("レチノール※1配合（※1整肌成分）")
        assert [(f.marker, f.footnote_text) for f in footnotes] == [("※1", "整肌成分")]

    def test_line_start_with_colon(self) -> None:
        footnotes = find_footnotes("浸透※1\n※1：角質層まで", AnnotationScope.FULL_TEXT)
        assert len(footnotes) == 1
        assert footnotes[0].footnote_text == "角質層まで"
        assert footnotes[0].scope is AnnotationScope.FULL_TEXT

    def test_line_start_without_separator(self) -> None:
        footnotes = find_footnotes("浸透※1\n※1角質層まで")
        assert [(f.marker, f.footnote_text) for f in footnotes] == [("※1", "角質層まで")]

    def test_span_covers_marker_and_text(self) -> None:
        text = "ケア ※1保湿成分"
        footnote = find_footnotes(text)[0]
        assert text[footnote.position:footnote.end] == "※1保湿成分"


class TestAnalyze:
    def test_bindings_in_segment(self) -> None:
        analysis = analyze(ANNOTATED)
        assert analysis.has_annotated_keywords
        assert [(b.keyword, b.marker, b.footnote_text, b.is_valid) for b in analysis.bindings] == [
            ("酸", "※1", "保湿成分", True),
            ("直注入", "※2", "角質層まで", True),
        ]
        assert all(b.scope is AnnotationScope.SEGMENT for b in analysis.bindings)

    def test_bare_marker_binding(self) -> None:
        analysis = analyze("クマ※対策 ※乾燥や古い角質によるくすみ、ハリが不足した暗い目の下")
        binding = analysis.bindings[0]
        assert binding.keyword == "クマ"
        assert binding.marker == "※"
        assert binding.is_valid
        assert binding.footnote_text.startswith("乾燥や古い角質")

    def test_full_text_fallback(self) -> None:
        analysis = analyze("浸透※1で潤う", full_text="浸透※1で潤う\n※1角質層まで")
        binding = analysis.bindings[0]
        assert binding.is_valid
        assert binding.scope is AnnotationScope.FULL_TEXT
        assert binding.footnote_text == "角質層まで"

    def test_segment_scope_wins(self) -> None:
        analysis = analyze("浸透※1 ※1角質層まで", full_text="浸透※1 ※1角質層まで\n※1別の説明")
        binding = analysis.bindings[0]
        assert binding.scope is AnnotationScope.SEGMENT
        assert binding.footnote_text == "角質層まで"

    def test_missing_footnote(self) -> None:
        binding = analyze("浸透※1で潤う").bindings[0]
        assert not binding.is_valid
        assert binding.footnote_text is None
        assert binding.scope is None

    def test_full_width_marker_matches_ascii_footnote(self) -> None:
        assert analyze("浸透※１ ※1角質層まで").bindings[0].is_valid

    def test_asterisk_and_word_markers(self) -> None:
        assert analyze("浸透*1 *1角質層まで").bindings[0].marker == "*1"
        binding = analyze("浸透注1 注1：角質層まで").bindings[0]
        assert (binding.keyword, binding.marker, binding.is_valid) == ("浸透", "注1", True)

    def test_shared_marker(self) -> None:
        analysis = analyze("コラーゲン※1とセラミド※1を配合 ※1保湿成分")
        assert [b.footnote_text for b in analysis.bindings] == ["保湿成分", "保湿成分"]

    def test_no_markers(self) -> None:
        assert analyze("普通の文章です。") == AnnotationAnalysis()

    def test_long_footnote_does_not_raise(self) -> None:
        analysis = analyze("浸透※1 ※1" + "角質層" * 5000)
        assert analysis.bindings[0].is_valid

    def test_format(self) -> None:
        rendered = format_annotation_analysis(analyze("浸透※1で潤う"))
        assert "[MISSING] 浸透※1" in rendered
        assert format_annotation_analysis(AnnotationAnalysis()) == "No annotated keywords."
