# app.py
import io
import logging.config

import pandas as pd
import streamlit as st

from matchers import FieldMatchSpec, Matcher, ScoringError
from matchers.config import DEFAULT_LOGGING_CONFIG
from matchers.frame import attach_scores, explain_frame

logging.config.dictConfig(DEFAULT_LOGGING_CONFIG)

st.set_page_config(page_title="Fuzzy field-match scoring", layout="wide")
st.title("🔎 Fuzzy field-match scoring")

st.write("Upload a .csv or .xlsx file: each row is a candidate document, each column a field.")

uploaded = st.file_uploader("Choose a file", type=["csv", "xlsx", "xls"])


@st.cache_data(show_spinner=False)
def read_table(bytes_data: bytes, name: str) -> pd.DataFrame:
    # Only pickle-serializable return types (DataFrame) for st.cache_data
    if name.endswith(".csv"):
        return pd.read_csv(io.BytesIO(bytes_data))
    return pd.read_excel(io.BytesIO(bytes_data), engine="openpyxl")


if uploaded is not None:
    df = read_table(uploaded.getvalue(), uploaded.name)
    st.caption(f"{df.shape[0]:,} rows × {df.shape[1]:,} columns")
    st.dataframe(df.head(100), use_container_width=True)

    cols = list(df.columns.astype(str))
    df.columns = cols

    with st.sidebar:
        st.header("🛠️ Field matchers")
        n_specs = st.number_input("Number of fields", min_value=1, max_value=max(1, len(cols)), value=1, step=1)

    specs = []
    for i in range(int(n_specs)):
        c1, c2, c3, c4 = st.columns([1.2, 1.6, 1.2, 1.6])
        with c1:
            field = st.selectbox("Field", options=cols, index=min(i, len(cols) - 1), key=f"field_{i}")
        with c2:
            value = st.text_input("Reference value", key=f"value_{i}")
        with c3:
            matcher = st.selectbox("Matcher", options=[m.value for m in Matcher], key=f"matcher_{i}")
        with c4:
            low, high = st.slider("Bounds (low, high)", 0.0, 1.0, (0.1, 0.9), step=0.01, key=f"bounds_{i}")
        specs.append(FieldMatchSpec(field, value, matcher, high=high, low=low))

    if st.button("Score rows"):
        try:
            scores = explain_frame(df, specs)
        except ScoringError as e:
            st.error(f"❌ Error: {e}")
        else:
            df_out = attach_scores(df, scores)
            score_col = df_out.columns[-1]
            df_out = df_out.sort_values(score_col, ascending=False)
            st.success(f"✅ {len(df_out)} row(s) scored.")
            st.dataframe(
                df_out.style.background_gradient(subset=[score_col], cmap="Greens"),
                use_container_width=True,
            )
            csv = df_out.to_csv(index=False).encode("utf-8")
            st.download_button("Download scores", csv, file_name="scores.csv")
