# ========================
# tests/test_loader.py
# ========================

import os
import tempfile
import unittest

import pandas as pd

from _sample import HEADER, ROWS, write_sample
from vidtrend.errors import LoadError
from vidtrend.ingest.loader import load_video_stats


class TestLoader(unittest.TestCase):
    """Test reading and validating the video statistics CSV."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def test_loads_typed_table(self):
        df = load_video_stats(write_sample(self.tmp.name))

        self.assertEqual(len(df), 5)
        self.assertEqual(
            list(df.columns),
            ["title", "video_id", "published_at", "keyword", "likes", "comments", "views"],
        )
        self.assertEqual(str(df["likes"].dtype), "Int64")
        self.assertTrue(pd.api.types.is_datetime64_any_dtype(df["published_at"]))
        self.assertTrue(pd.isna(df.loc[2, "likes"]))
        self.assertEqual(df.loc[3, "views"], 800)
        self.assertEqual(df.loc[4, "published_at"], pd.Timestamp("2022-09-09"))

    def test_strips_surrounding_whitespace(self):
        df = load_video_stats(write_sample(self.tmp.name))

        self.assertEqual(df.loc[1, "title"], "Apple review")
        self.assertEqual(df.loc[1, "keyword"], "tech")

    def test_file_without_index_column(self):
        header = HEADER.split(",", 1)[1]
        rows = [row.split(",", 1)[1] for row in ROWS]
        df = load_video_stats(write_sample(self.tmp.name, rows=rows, header=header))

        self.assertEqual(len(df), 5)
        self.assertEqual(df.loc[0, "video_id"], "v1")

    def test_missing_file(self):
        with self.assertRaises(LoadError):
            load_video_stats(os.path.join(self.tmp.name, "nope.csv"))

    def test_empty_file(self):
        path = os.path.join(self.tmp.name, "empty.csv")
        open(path, "w").close()
        with self.assertRaises(LoadError):
            load_video_stats(path)

    def test_missing_header(self):
        header = HEADER.replace(",Keyword", "")
        rows = ["0,Hello,v1,2021-03-01,50,10,2000"]
        with self.assertRaises(LoadError) as ctx:
            load_video_stats(write_sample(self.tmp.name, rows=rows, header=header))
        self.assertIn("Keyword", str(ctx.exception))

    def test_unexpected_header(self):
        header = HEADER + ",Channel"
        rows = [row + ",someone" for row in ROWS]
        with self.assertRaises(LoadError) as ctx:
            load_video_stats(write_sample(self.tmp.name, rows=rows, header=header))
        self.assertIn("Channel", str(ctx.exception))

    def test_non_numeric_count(self):
        rows = ["0,Hello,v1,2021-03-01,tech,many,10,2000"]
        with self.assertRaises(LoadError):
            load_video_stats(write_sample(self.tmp.name, rows=rows))

    def test_negative_count(self):
        rows = ["0,Hello,v1,2021-03-01,tech,-5,10,2000"]
        with self.assertRaises(LoadError):
            load_video_stats(write_sample(self.tmp.name, rows=rows))

    def test_fractional_count(self):
        rows = ["0,Hello,v1,2021-03-01,tech,5.5,10,2000"]
        with self.assertRaises(LoadError):
            load_video_stats(write_sample(self.tmp.name, rows=rows))

    def test_text_that_looks_like_missing_is_kept(self):
        rows = [
            "0,None,v1,2021-03-01,tech,5,1,2000",
            "1,null,v2,2021-03-01,N/A,5,1,2000",
        ]
        df = load_video_stats(write_sample(self.tmp.name, rows=rows))

        self.assertEqual(df["title"].tolist(), ["None", "null"])
        self.assertEqual(df["title"].str.len().tolist(), [4, 4])
        self.assertEqual(df["keyword"].tolist(), ["tech", "N/A"])

    def test_na_marker_in_counts(self):
        rows = [
            "0,Hello,v1,2021-03-01,tech,NA,1,2000",
            "1,World,v2,2021-03-01,tech,5,NaN,2000",
        ]
        df = load_video_stats(write_sample(self.tmp.name, rows=rows))

        self.assertTrue(pd.isna(df.loc[0, "likes"]))
        self.assertTrue(pd.isna(df.loc[1, "comments"]))

    def test_infinite_count(self):
        for value in ["inf", "1e400"]:
            rows = [f"0,Hello,v1,2021-03-01,tech,{value},10,2000"]
            with self.subTest(value=value):
                with self.assertRaises(LoadError):
                    load_video_stats(write_sample(self.tmp.name, rows=rows))

    def test_malformed_date(self):
        rows = ["0,Hello,v1,01/03/2021,tech,5,10,2000"]
        with self.assertRaises(LoadError):
            load_video_stats(write_sample(self.tmp.name, rows=rows))


if __name__ == "__main__":
    unittest.main()
