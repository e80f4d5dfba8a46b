"""
Streamlit UI for the Packer.

Features:
- Paste package lines or upload an input file
- Output tokens and a per-line results table
- Export results to CSV
- Per-line processing trace
"""
import streamlit as st
import sys
from pathlib import Path
from datetime import datetime

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from packer_tool.engine import PackingEngine, PackingError
from packer_tool.engine.report import results_frame
from packer_tool.config.settings import get_settings


st.set_page_config(
    page_title="Packer",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_engine():
    """Get cached engine instance."""
    return PackingEngine()


@st.cache_resource
def get_settings_cached():
    """Get cached settings."""
    return get_settings()


try:
    engine = get_engine()
    settings = get_settings_cached()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


# ============================================================================
# SIDEBAR: Active Constraints
# ============================================================================
with st.sidebar:
    st.header("⚖️ Constraints")

    with st.container(border=True):
        limits = engine.constraints
        st.metric("Max item price", f"€{limits.max_price_item:g}")
        st.metric("Max item weight", f"{limits.max_weight_item:g}")
        st.metric("Max package weight", f"{limits.max_weight_total:g}")
        st.metric("Max items per package", limits.max_item_count)

    st.caption(f"Workers: {engine.workers}")


# ============================================================================
# MAIN CONTENT
# ============================================================================
st.title("Packer")
st.caption(f"v1.0 | Packing Engine Active | {datetime.now().strftime('%Y-%m-%d')}")

example_text = ""
if settings.example_input.exists():
    example_text = settings.example_input.read_text(encoding='utf-8')

uploaded = st.file_uploader("Input file", type=None)
if uploaded is not None:
    input_text = uploaded.getvalue().decode('utf-8')
else:
    input_text = st.text_area(
        "Package lines",
        value=example_text,
        height=180,
        placeholder="81 : (1,53.38,€45) (2,88.62,€98)"
    )

if st.button("📦 Pack", type="primary"):
    if not input_text.strip():
        st.warning("No package lines to pack")
        st.stop()

    try:
        results = engine.process_text(input_text)
    except PackingError as e:
        st.error(str(e))
        if e.validation is not None:
            st.caption("Failed constraints: " + ", ".join(e.validation.failed_constraints()))
        st.stop()

    col1, col2 = st.columns([1.2, 1.8], gap="large")

    with col1:
        st.subheader("Output")
        st.code("\n".join(r.token for r in results), language=None)

    with col2:
        st.subheader("Summary")
        df = results_frame(results)
        st.dataframe(df, use_container_width=True, hide_index=True)
        st.download_button(
            "📥 CSV",
            data=df.to_csv(index=False),
            file_name="packing_results.csv",
            mime="text/csv",
        )

    st.markdown("### 🔍 Line Details")
    for number, result in enumerate(results, start=1):
        with st.expander(f"Line {number}: {result.token}"):
            st.caption(result.raw_line)
            st.text(result.get_trace_text())
