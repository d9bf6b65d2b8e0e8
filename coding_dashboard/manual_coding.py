"""
Module for handling manual coding (tagging) functionality in the dashboard.

This module only translates widget events into tagging engine calls; all
state lives in the TaggingEngine stored in the session.
"""

import streamlit as st

from text_analysis import InvalidInputError, NotFoundError, TaggingEngine
from text_analysis.visualization import plot_label_counts


def _preview(text: str, width: int = 80) -> str:
    return text if len(text) <= width else text[: width - 3] + "..."


def define_codes(engine: TaggingEngine) -> None:
    """
    Lets the user add codes to the vocabulary.

    Args:
        engine: The session's tagging engine
    """
    st.subheader("Define Codes")

    new_code = st.text_input(
        "New code:", key="new_code_input", placeholder="e.g. positive, urgent"
    )
    if st.button("Add Code"):
        try:
            engine.add_label(new_code.strip())
        except InvalidInputError as e:
            st.warning(f"Code not added: {e}")
        else:
            st.success(f"Code '{new_code.strip()}' is available.")

    if engine.labels:
        st.markdown("**Codes:** " + ", ".join(engine.labels))
    else:
        st.info("No codes defined yet.")


def apply_codes(engine: TaggingEngine) -> None:
    """
    Lets the user apply a code to one document.

    Args:
        engine: The session's tagging engine
    """
    st.subheader("Code Documents")

    message = st.session_state.pop("coding_message", None)
    if message:
        st.success(message)

    if not engine.labels:
        return

    document_id = st.selectbox(
        "Document:",
        options=[d.index for d in engine.documents],
        format_func=lambda i: f"{i}: {_preview(engine.documents[i - 1].text)}",
        key="coding_document",
    )
    document = engine.documents[document_id - 1]
    st.write(f"**Text:** {document.text}")
    st.markdown(
        f"**Current codes:** {', '.join(engine.labels_for(document_id)) or '(none)'}"
    )

    label = st.radio("Select a code:", options=engine.labels, key="coding_label")

    if st.button("Apply Code"):
        try:
            applied = engine.apply_label(document_id, label)
        except NotFoundError as e:
            st.error(f"Code not applied: {e}")
        else:
            # shown after the rerun
            st.session_state.coding_message = (
                f"Document {document_id} codes: {', '.join(applied)}"
            )
            st.rerun()


def show_coded_documents(engine: TaggingEngine) -> None:
    """
    Shows the coded table, the code frequency chart and excerpts per code.

    Args:
        engine: The session's tagging engine
    """
    st.subheader("Coded Documents")
    st.dataframe(engine.display_rows(), hide_index=True)

    counts = engine.label_counts()
    if counts.sum() == 0:
        return

    st.pyplot(plot_label_counts(counts))

    selected = st.selectbox("Show excerpts for code:", options=engine.labels)
    for document in engine.documents_with_label(selected):
        st.markdown(f"- **{document.index}:** {document.text}")


def code_documents(engine: TaggingEngine) -> None:
    """
    Step 6: Manual Coding
    Define codes, apply them to documents and review the result.

    Args:
        engine: The session's tagging engine
    """
    st.header("Step 6: Manual Coding")

    st.markdown(
        """
        Codes are short labels you apply to documents (e.g. 'positive', 'urgent').
        A document can carry several codes; applying the same code twice has no effect.
        Codes are kept when you load a new dataset, but applied codes are cleared.
        """
    )

    define_codes(engine)
    apply_codes(engine)
    show_coded_documents(engine)
