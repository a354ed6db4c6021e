import streamlit as st

from core.logging import configure_logging
from services.demos.calculator import multiply

configure_logging()

st.set_page_config(page_title="Multiplier")
st.title("Multiply two numbers")

a = st.text_input("First number", key="mult_a")
b = st.text_input("Second number", key="mult_b")

st.metric("Product", f"{multiply(a, b):g}")
