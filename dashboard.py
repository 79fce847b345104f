# dashboard.py

import streamlit as st

from main import run_walkthrough, WalkthroughError
from docking_system import DockingSystem
import config

st.set_page_config(page_title=config.PAGE_TITLE)

# --- Session State Initialization ---
if 'docking_system' not in st.session_state:
    st.session_state.docking_system = DockingSystem()
if 'walkthrough_run' not in st.session_state:
    st.session_state.walkthrough_run = False

system: DockingSystem = st.session_state.docking_system

# --- Sidebar Controls ---
with st.sidebar:
    st.header("Commands")

    if st.button("New bike", key="new_bike"):
        bike = system.new_bike()
        st.success(f"Created {system.label_for(bike)}")

    if st.button("Dock latest bike", key="dock"):
        if not system.bikes:
            st.warning("Create a bike before docking one.")
        else:
            docked = system.dock(system.bikes[-1])
            st.success(f"Docked {system.label_for(docked)}")

    if st.button("Report docked bike", key="report"):
        held = system.report()
        if held is None:
            st.info("The station is empty.")
        else:
            st.success(f"The station holds {system.label_for(held)}")

    if st.button("Release bike", key="release"):
        bike = system.release_bike()
        st.success(f"Released {system.label_for(bike)}, working: {bike.is_working()}")

    if st.button("Reset", key="reset"):
        st.session_state.docking_system = DockingSystem()
        st.session_state.walkthrough_run = False
        st.rerun()

    st.divider()

    if st.button("Run scripted walkthrough", key="walkthrough", type="primary"):
        with st.spinner("Running walkthrough..."):
            try:
                st.session_state.docking_system = run_walkthrough()
                st.session_state.walkthrough_run = True
            except WalkthroughError as e:
                st.error(f"Walkthrough failed: {e}")
            else:
                st.rerun()

# --- Main Content Area ---
st.title(config.PAGE_TITLE)
system = st.session_state.docking_system

col1, col2 = st.columns(2)
col1.metric("Bikes Created", f"{system.stats['bikes_created']:,}")
col2.metric("Docked Bike", system.label_for(system.station.bike))

st.subheader("Event Log")
if system.event_log:
    st.dataframe(system.event_log_frame(), hide_index=True)
else:
    st.info("Use the commands in the sidebar to create and dock bikes.")

if st.session_state.walkthrough_run:
    with st.expander("View Console Log"):
        try:
            with open(config.CONSOLE_OUTPUT_PATH, 'r') as f:
                st.code(f.read(), language="text")
        except FileNotFoundError:
            st.warning("Console output file not found.")
