"""
Feeder Analysis - Streamlit Page
================================

Interactive version of the printed feeder analysis report.

Run with:
    streamlit run src/transformer_inventory/ui/app.py
"""

import json
from pathlib import Path
from typing import List, Optional

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from transformer_inventory.classification import ALL, ClassificationConfig, DEFAULT_CONFIG, SubstationIndex, feeder_label
from transformer_inventory.records import LoadRecord, extract_rows, load_record_from_raw
from transformer_inventory.reporting import ViewState, feeder_options, run_report
from transformer_inventory.reporting.export import format_frame, report_to_frame, report_to_html
from transformer_inventory.ui.state import VIEW_KEY, WIDGET_DEFAULTS, dataset_fingerprint, reset_session, sync_session


DEFAULT_DATA_PATH = Path(__file__).parent.parent.parent.parent / "examples" / "data" / "feeder_analysis_table.json"

st.set_page_config(
    page_title="Feeder Analysis",
    page_icon="⚡",
    layout="wide",
)

st.markdown("""
<style>
    .stMetric {
        background-color: #f0f2f6;
        padding: 10px;
        border-radius: 5px;
    }
</style>
""", unsafe_allow_html=True)


@st.cache_data
def load_rows(raw_text: str) -> List[LoadRecord]:
    """Parse the dataset once per distinct upload."""
    return [load_record_from_raw(r) for r in extract_rows(json.loads(raw_text))]


def get_view() -> ViewState:
    if VIEW_KEY not in st.session_state:
        st.session_state[VIEW_KEY] = ViewState()
    return st.session_state[VIEW_KEY]


def set_view(view: ViewState):
    st.session_state[VIEW_KEY] = view


def on_substation_change():
    set_view(get_view().select_substation(st.session_state["substation_select"]))
    st.session_state["feeder_select"] = ALL
    st.session_state["query_input"] = ""


def on_feeder_change():
    set_view(get_view().select_feeder(st.session_state["feeder_select"]))


def on_query_change():
    set_view(get_view().search(st.session_state["query_input"]))


def on_min_kva_change():
    set_view(get_view().with_min_kva(st.session_state["min_kva_input"]))


def on_blocks_change():
    set_view(get_view().with_blocks(st.session_state["blocks_checkbox"]))


def init_widgets():
    for key, value in WIDGET_DEFAULTS.items():
        st.session_state.setdefault(key, value)


def on_reset():
    reset_session(st.session_state)


def sidebar_filters(records: List[LoadRecord], index: SubstationIndex, config: ClassificationConfig):
    """Filter widgets; every change replaces the ViewState in session state."""
    init_widgets()
    view = get_view()
    labels = dict(index.options(config))

    st.selectbox(
        "Substation",
        [ALL] + list(index),
        format_func=lambda k: "All Substations" if k == ALL else labels[k],
        key="substation_select",
        on_change=on_substation_change,
    )
    st.selectbox(
        "Feeder",
        [ALL] + feeder_options(records, index, view.substation),
        format_func=lambda f: "All Feeders" if f == ALL else feeder_label(f, config),
        key="feeder_select",
        on_change=on_feeder_change,
    )
    st.text_input("Search feeder", key="query_input", on_change=on_query_change)
    st.text_input("Min total kVA", key="min_kva_input", on_change=on_min_kva_change)
    st.checkbox("Show blocks", key="blocks_checkbox", on_change=on_blocks_change)
    st.button("Reset", on_click=on_reset, use_container_width=True)


def feeder_chart(df: pd.DataFrame):
    totals = df[df["kind"] == "feeder"]
    if totals.empty:
        return
    fig = go.Figure(data=[
        go.Bar(name="Phase 1", x=totals["label"], y=totals["phase1_kva"]),
        go.Bar(name="Phase 2", x=totals["label"], y=totals["phase2_kva"]),
        go.Bar(name="Phase 3", x=totals["label"], y=totals["phase3_kva"]),
    ])
    fig.update_layout(
        barmode="stack",
        xaxis_title="Feeder",
        yaxis_title="kVA",
        height=320,
    )
    st.plotly_chart(fig, use_container_width=True)


def main():
    """Main application."""
    st.title("⚡ Feeder Analysis")
    st.caption("Transformer kVA and customers by feeder")

    with st.sidebar:
        st.header("Dataset")
        uploaded = st.file_uploader("Upload feeder_analysis_table.json", type=["json"])
        config_file = st.file_uploader("Override tables (optional)", type=["json"])

        raw_text: Optional[str] = None
        if uploaded:
            raw_text = uploaded.getvalue().decode("utf-8")
        elif DEFAULT_DATA_PATH.exists():
            raw_text = DEFAULT_DATA_PATH.read_text(encoding="utf-8")
            st.success(f"Using: {DEFAULT_DATA_PATH.name}")
        config_text = config_file.getvalue().decode("utf-8") if config_file else None

    if raw_text is None:
        st.info("👈 Upload a feeder analysis dataset to see the report.")
        return

    try:
        records = load_rows(raw_text)
        config = (
            ClassificationConfig.model_validate(json.loads(config_text))
            if config_text else DEFAULT_CONFIG
        )
    except ValueError as e:
        st.error(f"Could not load dataset: {e}")
        return

    sync_session(st.session_state, dataset_fingerprint(raw_text, config_text))
    index = SubstationIndex.build(records, config)

    with st.sidebar:
        st.divider()
        st.header("Filters")
        sidebar_filters(records, index, config)

    view = get_view()
    report = run_report(records, view, index, config)
    df = report_to_frame(report)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Rows", f"{report.row_count:,}")
    with col2:
        st.metric("Feeders", f"{report.feeder_count:,}")
    with col3:
        st.metric(report.grand_total_label, f"{report.grand_total.combined_kva_total:,.2f} kVA")

    feeder_chart(df)
    st.dataframe(format_frame(df, report.show_blocks), hide_index=True, use_container_width=True)

    dl1, dl2 = st.columns(2)
    with dl1:
        st.download_button("Download CSV", df.to_csv(index=False), "feeder_analysis.csv", "text/csv")
    with dl2:
        st.download_button("Printable report", report_to_html(report), "feeder_analysis.html", "text/html")


if __name__ == "__main__":
    main()
