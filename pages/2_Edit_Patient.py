import streamlit as st

from core.logging_utils import configure_logging
from services.commands import invoke

configure_logging()

st.title("Edit Patient")

if "edit_patient_id" not in st.session_state:
    st.error("No patient selected. Please go back to the patient list.")
    if st.button("Back to Patient List"):
        st.switch_page("app.py")
    st.stop()

patient_id = st.session_state["edit_patient_id"]
result = invoke("get_patient", id=patient_id)

if "error" in result:
    st.error(result["error"])
    if st.button("Back to Patient List"):
        st.session_state.pop("edit_patient_id", None)
        st.switch_page("app.py")
    st.stop()

patient = result["ok"]

st.subheader(f"{patient['name']} ({patient['record_number']})")
if patient.get("created_at"):
    st.caption(f"Added: {patient['created_at']}")

with st.form("edit_patient_form"):
    name = st.text_input("Full Name", value=patient["name"])
    age = st.number_input("Age", min_value=0, max_value=150, step=1, value=int(patient["age"] or 0))
    phone_number = st.text_input("Phone Number", value=patient["phone_number"])
    address = st.text_area("Address", value=patient["address"] or "")
    initial_diagnosis = st.text_area("Initial Diagnosis", value=patient["initial_diagnosis"] or "")
    submitted = st.form_submit_button("Save Changes", type="primary")

    if submitted:
        updated = invoke(
            "update_patient",
            id=patient_id,
            patient={
                "name": name.strip(),
                "age": int(age),
                "address": address.strip() or None,
                "phone_number": phone_number.strip(),
                "initial_diagnosis": initial_diagnosis.strip() or None,
            },
        )
        if "error" in updated:
            st.error(updated["error"])
        else:
            st.success(updated["ok"])
            st.rerun()

# Printing is delegated to the native side on Android
with st.expander("Print Summary", expanded=False):
    summary = "\n".join([
        f"Record: {patient['record_number']}",
        f"Name: {patient['name']}",
        f"Age: {patient['age']}",
        f"Phone: {patient['phone_number']}",
        f"Diagnosis: {patient['initial_diagnosis'] or '-'}",
    ])
    st.code(summary)
    if st.button("Print"):
        printed = invoke("print_invoice", text=summary, job_name=patient["record_number"])
        if "error" in printed:
            st.warning(printed["error"])
        else:
            st.success("Sent to the print service.")

if st.button("Back to Patient List"):
    st.session_state.pop("edit_patient_id", None)
    st.switch_page("app.py")
