import streamlit as st

from planner.config import configure_logging, load_settings

st.set_page_config(page_title="Staffing Planner", layout="wide")

if "settings" not in st.session_state:
    st.session_state["settings"] = load_settings()
    configure_logging(st.session_state["settings"])

st.title("Staffing Planner: two-week history to hourly plan")
st.write(
    """
This app turns two weeks of hourly **calls** and **AHT** history into a weekly staffing plan.

Included:
- Workbook upload ("Calls" + "AHT" tabs) and a downloadable template
- Required agents per hour/day (utilization + availability inflation)
- Capped scenario: rescale the plan to a maximum concurrent agent budget
- Call capacity per interval for the capped plan
- Heatmap views + day totals
- Excel export bundle (Baseline Plan, Capped Plan, Call Capacity)
"""
)

st.info("Use the left sidebar to open the planner or the methodology notes.")
