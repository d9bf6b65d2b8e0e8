"""
Module for displaying word frequencies and the word cloud in the dashboard.
"""

import streamlit as st
from typing import List, Set

from text_analysis import ngram_frequencies, word_frequencies
from text_analysis.config import TOP_N_WORDS, WORDCLOUD_MAX_WORDS
from text_analysis.visualization import generate_wordcloud, plot_word_frequencies


def show_word_frequencies(texts: List[str], stopwords: Set[str]) -> None:
    """
    Step 3: Word Frequencies
    Shows the most frequent words and word pairs, and a word cloud.

    Args:
        texts: Document texts, in document order
        stopwords: Words excluded from the counts
    """
    st.header("Step 3: Word Frequencies")

    top_n = st.slider(
        "Number of words to show:", min_value=5, max_value=100, value=TOP_N_WORDS
    )

    freq_df = word_frequencies(texts, stopwords, top_n=top_n)
    if freq_df.empty:
        st.warning("No words left after removing stopwords.")
        return

    col_table, col_chart = st.columns([1, 2])
    with col_table:
        st.dataframe(freq_df, hide_index=True)
    with col_chart:
        st.pyplot(plot_word_frequencies(freq_df))

    if st.checkbox("Show most frequent word pairs", key="show_bigrams"):
        bigrams = ngram_frequencies(texts, n=2, stopwords=stopwords, top_n=top_n)
        if bigrams.empty:
            st.info("No word pairs found.")
        else:
            st.pyplot(plot_word_frequencies(bigrams, title="Most frequent word pairs"))

    st.subheader("Word Cloud")
    all_words = word_frequencies(texts, stopwords)
    frequencies = dict(zip(all_words["word"], all_words["count"]))
    st.pyplot(generate_wordcloud(frequencies, max_words=WORDCLOUD_MAX_WORDS))
