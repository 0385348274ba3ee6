import re
import unittest

from rich.style import Style
from rich.text import Span

from retap.engine import compile_pattern, extract_spans, render_highlight
from retap.errors import PatternCompileError, SpanOrderError
from retap.types import MatchSpan

HIGHLIGHT = Style.parse("color(204) on color(235)")


class CompilePatternTests(unittest.TestCase):
    def test_valid_pattern_compiles(self) -> None:
        matcher = compile_pattern("c.t")
        self.assertIsInstance(matcher, re.Pattern)
        self.assertEqual(matcher.pattern, "c.t")

    def test_empty_pattern_is_valid(self) -> None:
        self.assertIsInstance(compile_pattern(""), re.Pattern)

    def test_unbalanced_group_reports_reason_and_position(self) -> None:
        with self.assertRaises(PatternCompileError) as ctx:
            compile_pattern("c(t")
        self.assertEqual(ctx.exception.pattern, "c(t")
        self.assertEqual(ctx.exception.position, 1)
        self.assertIn("missing )", ctx.exception.reason)
        self.assertIn("c(t", str(ctx.exception))

    def test_unterminated_class_is_an_error(self) -> None:
        with self.assertRaises(PatternCompileError):
            compile_pattern("[a-")

    def test_flags_are_applied(self) -> None:
        matcher = compile_pattern("cat", re.IGNORECASE)
        self.assertIsNotNone(matcher.search("CAT"))


class ExtractSpansTests(unittest.TestCase):
    def test_single_match(self) -> None:
        spans = extract_spans(compile_pattern("c.t"), "the cat sat")
        self.assertEqual(spans, (MatchSpan(4, 7),))

    def test_adjacent_matches_stay_separate(self) -> None:
        spans = extract_spans(compile_pattern("a"), "aaa")
        self.assertEqual(spans, (MatchSpan(0, 1), MatchSpan(1, 2), MatchSpan(2, 3)))

    def test_no_match_is_empty(self) -> None:
        self.assertEqual(extract_spans(compile_pattern("dog"), "the cat sat"), ())

    def test_dot_covers_every_position_once(self) -> None:
        document = "ab c\td"
        spans = extract_spans(compile_pattern("."), document)
        self.assertEqual([s.start for s in spans], list(range(len(document))))
        self.assertTrue(all(s.end == s.start + 1 for s in spans))

    def test_empty_matches_terminate_and_advance(self) -> None:
        spans = extract_spans(compile_pattern(""), "abc")
        self.assertEqual(spans, (MatchSpan(0, 0), MatchSpan(1, 1), MatchSpan(2, 2), MatchSpan(3, 3)))

    def test_lookahead_assertion_terminates(self) -> None:
        document = "x" * 500
        spans = extract_spans(compile_pattern("(?=x)"), document)
        self.assertEqual(len(spans), 500)

    def test_spans_are_ordered_and_disjoint(self) -> None:
        spans = extract_spans(compile_pattern(r"\w*"), "foo bar  baz")
        for left, right in zip(spans, spans[1:]):
            self.assertLessEqual(left.end, right.start)

    def test_greedy_leftmost_match(self) -> None:
        spans = extract_spans(compile_pattern("a+"), "baaab aa")
        self.assertEqual(spans, (MatchSpan(1, 4), MatchSpan(6, 8)))


class RenderHighlightTests(unittest.TestCase):
    def test_no_spans_passes_document_through(self) -> None:
        document = "line one\nline [two]\n"
        text = render_highlight(document, (), HIGHLIGHT)
        self.assertEqual(text.plain, document)
        self.assertEqual(text.spans, [])

    def test_single_span_in_middle(self) -> None:
        text = render_highlight("the cat sat", [MatchSpan(4, 7)], HIGHLIGHT)
        self.assertEqual(text.plain, "the cat sat")
        self.assertEqual(text.spans, [Span(4, 7, HIGHLIGHT)])

    def test_each_adjacent_match_styled_individually(self) -> None:
        spans = [MatchSpan(0, 1), MatchSpan(1, 2), MatchSpan(2, 3)]
        text = render_highlight("aaa", spans, HIGHLIGHT)
        self.assertEqual(text.plain, "aaa")
        self.assertEqual(text.spans, [Span(0, 1, HIGHLIGHT), Span(1, 2, HIGHLIGHT), Span(2, 3, HIGHLIGHT)])

    def test_tail_after_last_span_is_kept(self) -> None:
        text = render_highlight("xxabyy", [MatchSpan(2, 4)], HIGHLIGHT)
        self.assertEqual(text.plain, "xxabyy")

    def test_empty_spans_emit_no_styles(self) -> None:
        spans = [MatchSpan(0, 0), MatchSpan(1, 1), MatchSpan(2, 2)]
        text = render_highlight("ab", spans, HIGHLIGHT)
        self.assertEqual(text.plain, "ab")
        self.assertEqual(text.spans, [])

    def test_out_of_order_span_truncates_output(self) -> None:
        spans = [MatchSpan(0, 2), MatchSpan(1, 3), MatchSpan(4, 5)]
        with self.assertLogs("retap.engine.renderer", level="WARNING"):
            text = render_highlight("abcdef", spans, HIGHLIGHT)
        self.assertEqual(text.plain, "ab")

    def test_out_of_order_span_raises_when_strict(self) -> None:
        with self.assertRaises(SpanOrderError) as ctx:
            render_highlight("abcdef", [MatchSpan(2, 4), MatchSpan(3, 5)], HIGHLIGHT, strict=True)
        self.assertEqual(ctx.exception.index, 1)
        self.assertEqual(ctx.exception.cursor, 4)

    def test_rendering_is_repeatable(self) -> None:
        spans = extract_spans(compile_pattern("a"), "banana")
        self.assertEqual(render_highlight("banana", spans, HIGHLIGHT), render_highlight("banana", spans, HIGHLIGHT))

    def test_dot_styles_whole_document(self) -> None:
        document = "hello"
        spans = extract_spans(compile_pattern("."), document)
        text = render_highlight(document, spans, HIGHLIGHT)
        styled = set()
        for span in text.spans:
            styled.update(range(span.start, span.end))
        self.assertEqual(styled, set(range(len(document))))


if __name__ == "__main__":
    unittest.main()
