"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import datetime, timezone

import altair as alt
import streamlit as st

from channel_explorer.application.use_cases.get_ad_unit_stats import (
    CategoryStats,
    GetAdUnitStatsUseCase,
)
from channel_explorer.application.use_cases.get_channel_table import (
    ChannelRow,
    GetChannelTableUseCase,
)
from channel_explorer.application.use_cases.get_market_summary import (
    GetMarketSummaryUseCase,
    MarketSummary,
)
from channel_explorer.application.use_cases.refresh_dashboard import (
    RefreshDashboardUseCase,
)
from channel_explorer.domain.constants import NOT_AVAILABLE
from channel_explorer.domain.models import AnalyticsSeries, DashboardState
from channel_explorer.domain.models.dashboard import Loadable, LoadStatus
from channel_explorer.domain.services.formatting import (
    count_display,
    cpm_display,
    paid_ratio_display,
    relative_time_label,
    to_http_url,
    token_display,
    usd_display,
)
from channel_explorer.domain.services.sorting import ChannelSort
from channel_explorer.domain.services.volume import sparkline_points
from channel_explorer.infrastructure.container import (
    build_market_repository,
    build_settings,
)
from channel_explorer.infrastructure.logging.logger import get_usage_logger
from channel_explorer.infrastructure.settings import MarketSettings

_STATE_KEY = "dashboard_state"
_LOADING = "…"


@st.cache_resource(show_spinner=False)
def _load_settings() -> MarketSettings:
    """Cached settings for the Streamlit session."""
    return build_settings()


def _refresh_state(
    state: DashboardState | None,
    settings: MarketSettings,
    now: datetime,
) -> DashboardState:
    """Refresh the dashboard state through the market repository."""
    repository = build_market_repository(settings)
    use_case = RefreshDashboardUseCase(market_repository=repository)
    return use_case.execute(state, now)


def _needs_refresh(
    state: DashboardState | None,
    now: datetime,
    refresh_seconds: int,
) -> bool:
    """Return True when the state is missing or older than the interval."""
    if state is None or state.last_loaded is None:
        return True
    return (now - state.last_loaded).total_seconds() >= refresh_seconds


def _current_state(settings: MarketSettings, now: datetime) -> DashboardState:
    """Return the session state, refreshing it when stale."""
    state = st.session_state.get(_STATE_KEY)
    if _needs_refresh(state, now, settings.refresh_seconds):
        state = _refresh_state(state, settings, now)
        st.session_state[_STATE_KEY] = state
    return state


def _loadable_text(source: Loadable, text: str | None) -> str:
    """Return the card text, a loading placeholder, or N/A after a failure."""
    if source.status is LoadStatus.LOADING:
        return _LOADING
    if text is None:
        return NOT_AVAILABLE if source.status is LoadStatus.FAILED else _LOADING
    return text


def _render_summary_cards(
    summary: MarketSummary,
    state: DashboardState,
) -> None:
    """Render the count and amount cards."""
    campaigns, units, publishers, advertisers, impressions = st.columns(5)
    campaigns.metric("Campaigns", count_display(summary.campaigns))
    units.metric("Ad units", count_display(summary.ad_units))
    publishers.metric("Publishers", count_display(summary.publishers))
    advertisers.metric("Advertisers", count_display(summary.advertisers))
    impressions.metric(
        "Monthly impressions",
        _loadable_text(
            state.monthly_impressions,
            count_display(summary.monthly_impressions)
            if summary.monthly_impressions is not None
            else None,
        ),
    )

    deposits, paid, locked, volume = st.columns(4)
    deposits.metric(
        "Total campaign deposits",
        token_display(summary.total_deposit),
    )
    paid.metric(
        "Paid out",
        token_display(summary.total_paid),
        paid_ratio_display(summary.paid_ratio),
        delta_color="off",
    )
    locked.metric(
        "Locked up on-chain",
        _loadable_text(
            state.core_balance,
            token_display(summary.locked_on_chain)
            if summary.locked_on_chain is not None
            else None,
        ),
    )
    volume.metric(
        "24h volume",
        _loadable_text(
            state.daily_volume,
            token_display(summary.daily_volume)
            if summary.daily_volume is not None
            else None,
        ),
    )
    if state.daily_volume.value is not None:
        with volume:
            _render_sparkline(state.daily_volume.value)


def _render_sparkline(series: AnalyticsSeries) -> None:
    """Render a small volume line chart when enough buckets exist."""
    data = _prepare_sparkline_data(series)
    if not data:
        return
    chart = alt.Chart(alt.Data(values=data)).mark_line(
        color="#c8dbec",
        strokeWidth=4,
    ).encode(
        x=alt.X("x:Q", axis=None),
        y=alt.Y("y:Q", axis=None, scale=alt.Scale(reverse=True)),
    ).properties(height=60)
    st.altair_chart(chart, width="stretch")


def _prepare_sparkline_data(
    series: AnalyticsSeries,
) -> list[dict[str, int]]:
    """Convert sparkline points into Altair-ready rows."""
    points = sparkline_points(series)
    if points is None:
        return []
    return [{"x": x, "y": y} for x, y in points]


def _channel_table_data(
    rows: Sequence[ChannelRow],
    now: datetime,
    ipfs_gateway: str,
) -> list[dict[str, str]]:
    """Format channel rows for the dataframe."""
    return [
        {
            "URL": row.status_url or row.id_prefix,
            "Channel": row.id_prefix,
            "USD estimate": usd_display(row.usd_estimate),
            "Deposit": token_display(row.deposit),
            "CPM": token_display(row.cpm),
            "Paid": token_display(row.paid),
            "Paid - %": paid_ratio_display(row.paid_ratio),
            "Status": row.status.value,
            "Created": relative_time_label(now, row.created),
            "Recent": "yes" if row.is_recent else "no",
            "Preview": (
                to_http_url(row.preview.media_url, ipfs_gateway)
                if row.preview is not None
                else ""
            ),
        }
        for row in rows
    ]


def _ad_unit_stats_data(
    stats: Sequence[CategoryStats],
) -> list[dict[str, str]]:
    """Format category stats for the dataframe."""
    return [
        {
            "Ad Size": item.category,
            "CPM": cpm_display(item.weighted_avg_price),
            "Active volume": token_display(item.active_volume),
        }
        for item in stats
    ]


def _render_channels(
    state: DashboardState,
    now: datetime,
    ipfs_gateway: str,
) -> None:
    """Render the sortable channels table."""
    sort = st.selectbox(
        "Sort",
        options=list(ChannelSort),
        format_func=lambda item: item.label,
        index=0,
    )
    get_usage_logger().info(f"Channels sorted by {sort.value}")
    rows = GetChannelTableUseCase().execute(state, sort)
    st.caption(f"{len(rows)} channels shown")
    st.dataframe(
        _channel_table_data(rows, now, ipfs_gateway),
        width="stretch",
        hide_index=True,
        column_config={
            "URL": st.column_config.LinkColumn("URL", display_text="status"),
            "Preview": st.column_config.ImageColumn("Preview"),
        },
    )


def _render_ad_unit_stats(state: DashboardState) -> None:
    """Render the per-category stats table."""
    stats = GetAdUnitStatsUseCase().execute(state)
    st.subheader("Ad units")
    if not stats:
        st.info("No ad units found.")
        return
    st.dataframe(_ad_unit_stats_data(stats), width="stretch", hide_index=True)


def _render_errors(state: DashboardState) -> None:
    """Show refresh errors while keeping previous values on screen."""
    sources = {
        "Channels": state.channels,
        "On-chain balance": state.core_balance,
        "24h volume": state.daily_volume,
        "Monthly impressions": state.monthly_impressions,
    }
    for label, source in sources.items():
        if source.status is LoadStatus.FAILED:
            st.warning(f"{label} could not be refreshed: {source.error}")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Channel Explorer", layout="wide")
    st.title("Channel Explorer")

    page = st.sidebar.selectbox("Page", ["Summary", "Channels"])
    get_usage_logger().info(f"Page viewed: {page}")
    settings = _load_settings()
    now = datetime.now(timezone.utc)
    state = _current_state(settings, now)
    _render_errors(state)

    summary = GetMarketSummaryUseCase().execute(state)
    if summary is None:
        st.subheader("Loading...")
        return
    _render_summary_cards(summary, state)
    if page == "Channels":
        _render_channels(state, now, settings.ipfs_gateway)
    _render_ad_unit_stats(state)


if __name__ == "__main__":  # pragma: no cover
    main()
