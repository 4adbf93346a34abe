import streamlit as st

st.set_page_config(page_title="Methodology", layout="wide")
st.title("Methodology")

st.markdown(
    r"""
### Interval forecast

- Each hour/day cell is averaged across the two observed weeks:
  \[
  \text{avg} = \frac{\text{week}_1 + \text{week}_2}{2}
  \]
  Blank or non-numeric cells count as 0 on their own, so one blank week halves that day's average
  instead of zeroing it (earlier versions of the planner zeroed the whole day). Hours missing from
  either tab are skipped.

### Required agents

- Offered load (Erlangs):
  \[
  a = \frac{\text{calls} \cdot \text{AHT}}{3600}
  \]

- Inflate for the utilization ceiling (0.75), then for availability (0.875):
  \[
  \text{required} = \max\left(\left\lceil \frac{a / 0.75}{0.875} \right\rceil, 2\right)
  \]

- No calls or no AHT → the staffing floor of 2 agents.

### Capped scenario

- Scale the whole curve so the busiest interval lands on the budget \(B\). A budget of 0 (or less) schedules nobody:
  \[
  \text{scheduled} = \left\lceil \text{required} \cdot \frac{B}{\max(\text{required})} \right\rceil
  \]
- Every interval moves by the same ratio, so quieter hours can end up below their own requirement.

### Call capacity

- Calls one agent can take in an hour:
  \[
  \text{calls per agent} = \frac{3600 \cdot 0.75}{\text{AHT}}
  \]
- Capacity \(= \lfloor \text{scheduled} \cdot \text{calls per agent} \rfloor\); intervals with no AHT report 0.
"""
)
