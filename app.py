#!/usr/bin/env python3
"""EcoField Safety Dashboard."""

from __future__ import annotations

import logging
from typing import List, Optional

import plotly.graph_objects as go
import requests
import streamlit as st

from ecofield.data.cities import CITIES, City, get_city
from ecofield.data.openweather import OpenWeatherClient
from ecofield.services.compliance import ComplianceEntry
from ecofield.services.dashboard import DashboardData, build_dashboard
from ecofield.services.forecast import ForecastPoint, forecast_frame
from ecofield.services.insights import decision_color, describe_aqi, risk_color, summarize_dashboard
from ecofield.utils.config import load_risk_config
from ecofield.utils.logging import configure_logging

configure_logging()
LOGGER = logging.getLogger(__name__)

GENERIC_ERROR = "Failed to fetch environmental data. Please check your internet connection and try again."
STATUS_COLORS = {"safe": "#7CAB48", "warning": "#D4AF37", "danger": "#C25B52"}


@st.cache_data(show_spinner=False, ttl=600)
def load_dashboard(city_name: str) -> DashboardData:
    return build_dashboard(get_city(city_name), OpenWeatherClient(), load_risk_config())


def build_risk_gauge(ers: int, level: str) -> go.Figure:
    figure = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=ers,
            title={"text": "Environmental Risk Score"},
            gauge={
                "axis": {"range": [0, 100]},
                "bar": {"color": risk_color(level)},
                "steps": [
                    {"range": [0, 30], "color": "#E8F1DE"},
                    {"range": [30, 60], "color": "#F6EFD3"},
                    {"range": [60, 100], "color": "#F3DEDC"},
                ],
            },
        )
    )
    figure.update_layout(height=280, margin=dict(l=20, r=20, t=50, b=10))
    return figure


def build_compliance_chart(entries: List[ComplianceEntry]) -> go.Figure:
    figure = go.Figure(
        go.Bar(
            x=[entry.percentage for entry in entries],
            y=[entry.pollutant for entry in entries],
            orientation="h",
            marker_color=[STATUS_COLORS[entry.status] for entry in entries],
            text=[f"{entry.current:.1f} / {entry.limit:g} {entry.unit}" for entry in entries],
            hovertext=[f"{entry.raw_percentage:.0f}% of limit ({entry.status})" for entry in entries],
        )
    )
    figure.update_layout(
        title="Regulatory Compliance",
        xaxis=dict(range=[0, 100], title="% of limit"),
        yaxis=dict(autorange="reversed"),
        height=320,
    )
    return figure


def build_trend_chart(points: List[ForecastPoint]) -> go.Figure:
    frame = forecast_frame(points)
    figure = go.Figure()
    if frame.empty:
        return figure
    figure.add_trace(go.Scatter(x=frame["timestamp"], y=frame["ers"], name="ERS", mode="lines", line=dict(width=3)))
    for column, label in (("pm2_5", "PM2.5"), ("no2", "NO₂"), ("o3", "O₃")):
        figure.add_trace(go.Scatter(x=frame["timestamp"], y=frame[column], name=label, mode="lines"))
    figure.update_layout(title="Forecast Trend", xaxis_title="Time", yaxis_title="ERS / µg/m³", height=320)
    return figure


def render_dashboard(data: DashboardData) -> None:
    risk_col, conditions_col = st.columns(2)
    with risk_col:
        st.plotly_chart(build_risk_gauge(data.ers, data.risk_level), use_container_width=True)
        st.caption(f"Risk level: **{data.risk_level.upper()}**")
    with conditions_col:
        st.subheader("Current Conditions")
        current = data.current
        cols = st.columns(2)
        cols[0].metric("Temperature", f"{current.temperature:.1f} °C")
        cols[1].metric("Wind", f"{current.wind_speed:.1f} m/s")
        cols[0].metric("Humidity", f"{current.humidity:.0f}%")
        cols[1].metric("Air Quality", f"{current.aqi} ({describe_aqi(current.aqi)})")
        st.caption(current.description.capitalize())

    recommendation = data.recommendation
    color = decision_color(recommendation.decision)
    st.markdown(
        f"<div style='border-left: 6px solid {color}; padding: 0.75rem 1rem;'>"
        f"<h3 style='color: {color}; margin: 0;'>{recommendation.decision}</h3>"
        f"<p style='margin: 0.5rem 0 0 0;'>{recommendation.message}</p></div>",
        unsafe_allow_html=True,
    )

    summary = summarize_dashboard(data)
    if summary["over_limit"]:
        st.warning(f"Above regulatory limit: {', '.join(summary['over_limit'])}")

    compliance_col, trend_col = st.columns([5, 7])
    with compliance_col:
        st.plotly_chart(build_compliance_chart(data.compliance), use_container_width=True)
    with trend_col:
        st.plotly_chart(build_trend_chart(data.forecast), use_container_width=True)


def main() -> None:
    st.set_page_config(page_title="EcoField Safety Dashboard", layout="wide")
    st.title("EcoField Safety Dashboard")
    st.caption("Environmental risk and go/no-go guidance for outdoor field operations.")

    city_names = [city.name for city in CITIES]
    city_name = st.sidebar.selectbox("City", city_names, format_func=lambda name: get_city(name).label)
    selected: City = get_city(city_name)

    data: Optional[DashboardData] = None
    error: Optional[str] = None
    try:
        with st.spinner(f"Fetching conditions for {selected.name}..."):
            data = load_dashboard(selected.name)
    except requests.HTTPError as exc:
        status = getattr(exc.response, "status_code", "unknown")
        LOGGER.error("OpenWeather request failed with status %s: %s", status, exc)
        error = GENERIC_ERROR
    except Exception as exc:  # noqa: BLE001
        LOGGER.exception("Unable to build dashboard for %s", selected.name)
        error = f"{GENERIC_ERROR} ({exc})" if isinstance(exc, RuntimeError) else GENERIC_ERROR

    if error:
        st.error(error)
        if st.button("Retry"):
            load_dashboard.clear()
            st.rerun()
    elif data is not None:
        render_dashboard(data)

    st.sidebar.markdown("---")
    st.sidebar.markdown("Data provided by OpenWeatherMap API.")


if __name__ == "__main__":
    main()
