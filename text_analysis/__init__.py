# __init__.py
from .exceptions import TaggingError, InvalidInputError, NotFoundError
from .tagging import Document, TaggingEngine
from .data_processing import (
    load_data,
    load_text_lines,
    build_documents,
    sanitize_dataframe,
)
from .corpus_statistics import document_lengths, summarize_corpus
from .word_frequency import (
    get_stopwords,
    tokenize,
    word_frequencies,
    ngram_frequencies,
)
from .themes import (
    ThemeGroup,
    parse_theme_keywords,
    match_themes,
    theme_counts,
    extract_keyword_groups,
)
from .sentiment import categorize, score_texts, sentiment_distribution
from .export import export_filename, to_csv_bytes, to_excel_bytes

__all__ = [
    # Errors
    "TaggingError",
    "InvalidInputError",
    "NotFoundError",
    # Tagging engine
    "Document",
    "TaggingEngine",
    # Data processing
    "load_data",
    "load_text_lines",
    "build_documents",
    "sanitize_dataframe",
    # Statistics
    "document_lengths",
    "summarize_corpus",
    # Word frequencies
    "get_stopwords",
    "tokenize",
    "word_frequencies",
    "ngram_frequencies",
    # Themes
    "ThemeGroup",
    "parse_theme_keywords",
    "match_themes",
    "theme_counts",
    "extract_keyword_groups",
    # Sentiment
    "categorize",
    "score_texts",
    "sentiment_distribution",
    # Export
    "export_filename",
    "to_csv_bytes",
    "to_excel_bytes",
]
