import streamlit as st

from core.logging_utils import configure_logging
from services.commands import invoke

configure_logging()

st.title("Register New Patient")

# Record number is a suggestion; the unique constraint decides on insert
generated = invoke("generate_record_number")
if "error" in generated:
    st.error(f"Could not generate a record number: {generated['error']}")
    st.stop()

record_number = generated["ok"]

with st.form("patient_form"):
    st.text_input("Record Number", value=record_number, disabled=True)
    name = st.text_input("Full Name", placeholder="John Doe")
    age = st.number_input("Age", min_value=0, max_value=150, step=1)
    phone_number = st.text_input("Phone Number", placeholder="+1-555-0123")
    address = st.text_area("Address")
    initial_diagnosis = st.text_area("Initial Diagnosis")
    submitted = st.form_submit_button("Create Patient")

    if submitted:
        if not name.strip() or not phone_number.strip():
            st.error("Name and phone number are required.")
        else:
            result = invoke(
                "add_patient",
                patient={
                    "record_number": record_number,
                    "name": name.strip(),
                    "age": int(age),
                    "address": address.strip() or None,
                    "phone_number": phone_number.strip(),
                    "initial_diagnosis": initial_diagnosis.strip() or None,
                },
            )
            if "error" in result:
                # Most likely someone else took this number; a rerun generates a new one
                st.error(f"{result['error']}. Please submit again.")
            else:
                st.success(f"{result['ok']}: {record_number}")
                st.switch_page("app.py")

if st.button("Back to Patient List"):
    st.switch_page("app.py")
