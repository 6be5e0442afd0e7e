import streamlit as st

from core.logging_utils import configure_logging
from services.commands import invoke


def go_to(page_path: str):
    st.switch_page(page_path)


def main():
    st.set_page_config(
        page_title="Patient Records",
        page_icon="🩺",
        layout="wide",
    )
    configure_logging()

    cols = st.columns([4, 1])
    with cols[0]:
        st.title("Patient List")
    with cols[1]:
        if st.button("Add Patient", type="primary", use_container_width=True):
            go_to("pages/1_Add_Patient.py")

    # Search bar
    search_query = st.text_input("Search by name or record number", placeholder="e.g., Jane or PT002026")

    result = invoke("get_patients")
    if "error" in result:
        st.error(f"Could not load patients: {result['error']}")
        st.stop()

    patients = result["ok"]

    # Filter
    if search_query.strip():
        q = search_query.strip().lower()
        patients = [
            p for p in patients
            if q in (p["name"] or "").lower() or q in (p["record_number"] or "").lower()
        ]

    if not patients:
        st.info("No patients found.")
        return

    st.caption(f"{len(patients)} patient(s)")

    for p in patients:
        with st.container():
            st.write(f"**{p['name']}**  —  {p['record_number']}")
            st.write(f"Age: {p['age']}, Phone: {p['phone_number']}")
            if p.get("initial_diagnosis"):
                st.caption(f"Initial diagnosis: {p['initial_diagnosis']}")

            col1, col2 = st.columns([1, 1])
            with col1:
                if st.button(f"Edit ({p['record_number']})", key=f"edit_{p['id']}"):
                    st.session_state["edit_patient_id"] = p["id"]
                    go_to("pages/2_Edit_Patient.py")
            with col2:
                if st.button(f"Delete ({p['record_number']})", key=f"delete_{p['id']}"):
                    outcome = invoke("delete_patient", id=p["id"])
                    if "error" in outcome:
                        st.error(outcome["error"])
                    else:
                        st.success(outcome["ok"])
                        st.rerun()

            st.markdown("---")


if __name__ == "__main__":
    main()
