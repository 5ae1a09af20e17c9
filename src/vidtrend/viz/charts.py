"""Static and interactive charts built with plotly express."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from ..analysis.aggregate import (
    comments_by_year_keyword,
    title_length_by_year_keyword,
    videos_by_year,
)
from ..utils.io import ensure_dir

log = logging.getLogger(__name__)

BAR_COLOR = "#765add"
TEMPLATE = "plotly_white"


@dataclass(frozen=True)
class Encoding:
    """Which columns map to which visual channel."""

    kind: str
    x: str
    y: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None
    title: str = ""
    labels: Dict[str, str] = field(default_factory=dict)


def render(df: pd.DataFrame, enc: Encoding, **kwargs) -> go.Figure:
    """Build a figure of kind ``bar``, ``histogram``, ``line`` or ``scatter``."""
    common = dict(x=enc.x, title=enc.title, labels=enc.labels, template=TEMPLATE)
    if enc.kind == "bar":
        fig = px.bar(df, y=enc.y, color=enc.color, **common, **kwargs)
    elif enc.kind == "histogram":
        fig = px.histogram(df, y=enc.y, color=enc.color, **common, **kwargs)
    elif enc.kind == "line":
        fig = px.line(df, y=enc.y, color=enc.color, markers=True, **common, **kwargs)
    elif enc.kind == "scatter":
        fig = px.scatter(df, y=enc.y, color=enc.color, size=enc.size, **common, **kwargs)
    else:
        raise ValueError(f"Unsupported chart kind: {enc.kind!r}")
    return fig


def videos_by_year_chart(df: pd.DataFrame) -> go.Figure:
    counts = videos_by_year(df)
    fig = render(
        counts,
        Encoding(
            kind="bar",
            x="publication_year",
            y="video_count",
            title="Number of videos by year",
            labels={"publication_year": "Publication Year", "video_count": "Count"},
        ),
    )
    fig.update_traces(marker_color=BAR_COLOR)
    return fig


def title_length_histogram(df: pd.DataFrame, bins: int = 30) -> go.Figure:
    fig = render(
        df,
        Encoding(
            kind="histogram",
            x="title_length",
            title="Distribution of title length",
            labels={"title_length": "Title Length (char)"},
        ),
        nbins=bins,
    )
    fig.update_traces(marker_color=BAR_COLOR)
    fig.update_layout(yaxis_title="Frequency")
    return fig


def comments_trend_chart(df: pd.DataFrame) -> go.Figure:
    """Total comments per keyword over publication years, in thousands."""
    totals = comments_by_year_keyword(df)
    totals["total_comments"] = totals["total_comments"] / 1000
    return render(
        totals,
        Encoding(
            kind="line",
            x="publication_year",
            y="total_comments",
            color="keyword",
            title="Total Comments by Category Over Time (by 1k)",
            labels={"publication_year": "Published Year", "total_comments": "Comment Count"},
        ),
    )


def title_length_trend_chart(df: pd.DataFrame) -> go.Figure:
    means = title_length_by_year_keyword(df)
    return render(
        means,
        Encoding(
            kind="line",
            x="publication_year",
            y="avg_title_length",
            color="keyword",
            title="Avg Title Length by Category Over Time",
            labels={"publication_year": "Published Year", "avg_title_length": "Avg Title Length (char)"},
        ),
    )


def engagement_scatter(df: pd.DataFrame) -> go.Figure:
    """Likes vs comments per 1k views, sized by views."""
    plot_df = df.dropna(subset=["likes_per_1k", "comments_per_1k"]).copy()
    plot_df["views"] = plot_df["views"].astype("float64")
    plot_df["views_100k"] = (plot_df["views"] / 100_000).round(2)
    fig = render(
        plot_df,
        Encoding(
            kind="scatter",
            x="likes_per_1k",
            y="comments_per_1k",
            color="keyword",
            size="views",
            title="Likes vs Comments per 1k Views",
            labels={
                "likes_per_1k": "Likes per 1k",
                "comments_per_1k": "Comments per 1k",
                "views_100k": "Views (100k)",
                "keyword": "Keyword",
            },
        ),
        size_max=70,
        hover_data={
            "likes_per_1k": True,
            "comments_per_1k": True,
            "views_100k": True,
            "keyword": True,
            "views": False,
        },
    )
    fig.update_traces(marker=dict(sizemode="diameter", opacity=0.5))
    return fig


def build_figures(df: pd.DataFrame) -> Dict[str, go.Figure]:
    """All charts of the analysis, keyed by file stem."""
    return {
        "videos_by_year": videos_by_year_chart(df),
        "title_length_histogram": title_length_histogram(df),
        "comments_by_keyword_over_time": comments_trend_chart(df),
        "title_length_by_keyword_over_time": title_length_trend_chart(df),
        "likes_vs_comments_per_1k": engagement_scatter(df),
    }


def save_figure(fig: go.Figure, name: str, out_dir: str) -> str:
    """Write ``fig`` as standalone HTML and return the path."""
    ensure_dir(out_dir)
    path = os.path.join(out_dir, f"{name}.html")
    fig.write_html(path, include_plotlyjs="cdn")
    log.info("Wrote chart %s", path)
    return path
