"""
Tests for the manual coding step of the dashboard, driven through Streamlit's AppTest.
"""

from streamlit.testing.v1 import AppTest


def coding_script():
    """Minimal app: two documents, one code, the "Code Documents" step."""
    import streamlit as st

    from coding_dashboard.manual_coding import apply_codes
    from text_analysis import Document, TaggingEngine

    if "engine" not in st.session_state:
        engine = TaggingEngine()
        engine.reset([Document(1, "first answer"), Document(2, "second answer")])
        engine.add_label("urgent")
        st.session_state.engine = engine

    apply_codes(st.session_state.engine)


def test_apply_code_confirmation_survives_rerun():
    at = AppTest.from_function(coding_script).run()
    assert not at.exception
    assert len(at.success) == 0

    at.button[0].click().run()

    assert not at.exception
    assert [s.value for s in at.success] == ["Document 1 codes: urgent"]
    assert at.session_state["engine"].labels_for(1) == ["urgent"]

    # the confirmation is shown once, not on every later rerun
    at.run()
    assert len(at.success) == 0
