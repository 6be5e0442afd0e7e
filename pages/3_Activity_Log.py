import streamlit as st

from core.logging_utils import configure_logging
from services.commands import invoke

configure_logging()

st.title("Activity Log")
st.caption("Most recent changes to patient records.")

limit = st.selectbox("Show", [25, 100, 500], index=0)

result = invoke("get_activity_logs", limit=limit)
if "error" in result:
    st.error(f"Could not load the activity log: {result['error']}")
    st.stop()

entries = result["ok"]
if not entries:
    st.info("No activity yet.")
else:
    for entry in entries:
        target = entry["target_name"] or f"#{entry['target_id']}"
        st.write(f"**{entry['operator_name']}** {entry['action']}: {target}")
        st.caption(entry["created_at"] or "")

if st.button("Back to Patient List"):
    st.switch_page("app.py")
