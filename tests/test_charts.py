# ========================
# tests/test_charts.py
# ========================

import os
import tempfile
import unittest

from _sample import write_sample
from vidtrend.features.cleaning import clean
from vidtrend.features.feature_engineering import derive
from vidtrend.ingest.loader import load_video_stats
from vidtrend.viz.charts import (
    Encoding,
    build_figures,
    comments_trend_chart,
    engagement_scatter,
    render,
    save_figure,
    title_length_histogram,
)


class TestCharts(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.table = derive(clean(load_video_stats(write_sample(self.tmp.name))))

    def test_build_figures(self):
        figures = build_figures(self.table)
        self.assertEqual(
            set(figures),
            {
                "videos_by_year",
                "title_length_histogram",
                "comments_by_keyword_over_time",
                "title_length_by_keyword_over_time",
                "likes_vs_comments_per_1k",
            },
        )

    def test_one_line_per_keyword(self):
        fig = comments_trend_chart(self.table)
        self.assertEqual(sorted(trace.name for trace in fig.data), ["food", "tech"])

    def test_comments_in_thousands(self):
        fig = comments_trend_chart(self.table)
        tech = next(trace for trace in fig.data if trace.name == "tech")
        self.assertEqual(list(tech.y), [0.04, 0.003])

    def test_histogram_bins(self):
        fig = title_length_histogram(self.table, bins=30)
        self.assertEqual(fig.data[0].nbinsx, 30)

    def test_scatter_skips_undefined_ratios(self):
        table = self.table.copy()
        table.loc[0, "likes_per_1k"] = float("nan")
        fig = engagement_scatter(table)
        self.assertEqual(sum(len(trace.x) for trace in fig.data), 3)

    def test_unknown_kind(self):
        with self.assertRaises(ValueError):
            render(self.table, Encoding(kind="pie", x="keyword"))

    def test_scatter_hover_labels(self):
        fig = engagement_scatter(self.table)
        template = fig.data[0].hovertemplate
        self.assertIn("Views (100k)", template)
        self.assertIn("Likes per 1k", template)

    def test_save_figure(self):
        fig = title_length_histogram(self.table)
        path = save_figure(fig, "hist", os.path.join(self.tmp.name, "figures"))
        self.assertTrue(os.path.exists(path))
        self.assertTrue(path.endswith("hist.html"))


if __name__ == "__main__":
    unittest.main()
