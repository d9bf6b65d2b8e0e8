"""
config.py

This module manages configuration settings for the text analysis dashboard.
Values are read from environment variables (optionally through a .env file)
and fall back to sensible defaults.
"""

import os
from dotenv import load_dotenv
from typing import Dict, List

# Load environment variables from a .env file if one is present.
load_dotenv()

# Ingestion
CSV_DELIMITER: str = os.getenv("QDA_CSV_DELIMITER", ",")

# Word frequencies and word cloud
STOPWORD_LANGUAGES: List[str] = [
    lang.strip()
    for lang in os.getenv("QDA_STOPWORD_LANGUAGES", "english").split(",")
    if lang.strip()
]
TOP_N_WORDS: int = int(os.getenv("QDA_TOP_N_WORDS", "20"))
WORDCLOUD_MAX_WORDS: int = int(os.getenv("QDA_WORDCLOUD_MAX_WORDS", "200"))
MIN_TOKEN_LENGTH: int = int(os.getenv("QDA_MIN_TOKEN_LENGTH", "2"))

# Theme grouping (TF-IDF + KMeans)
THEME_GROUPS: int = int(os.getenv("QDA_THEME_GROUPS", "4"))
THEME_TERMS: int = int(os.getenv("QDA_THEME_TERMS", "8"))
RANDOM_STATE: int = int(os.getenv("QDA_RANDOM_STATE", "42"))

# Sentiment thresholds on the VADER compound score
SENTIMENT_POSITIVE_THRESHOLD: float = float(
    os.getenv("QDA_SENTIMENT_POSITIVE_THRESHOLD", "0.05")
)
SENTIMENT_NEGATIVE_THRESHOLD: float = float(
    os.getenv("QDA_SENTIMENT_NEGATIVE_THRESHOLD", "-0.05")
)

# Export
EXPORT_PREFIX: str = os.getenv("QDA_EXPORT_PREFIX", "coded_data")
LABEL_DELIMITER: str = ","

# Logging
LOG_LEVEL: str = os.getenv("QDA_LOG_LEVEL", "INFO").upper()

# Starter keyword dictionary for the theme view.
# Users can edit it in the dashboard; keys are theme names, values are keywords.
DEFAULT_THEME_KEYWORDS: Dict[str, List[str]] = {
    "service": ["service", "staff", "support", "help", "helpful"],
    "price": ["price", "cost", "expensive", "cheap", "value"],
    "quality": ["quality", "broken", "durable", "works", "defect"],
    "delivery": ["delivery", "shipping", "late", "arrived", "delay"],
}

# NOTE:
# A .env file might contain:
#   QDA_CSV_DELIMITER=;
#   QDA_STOPWORD_LANGUAGES=english,french
#   QDA_LOG_LEVEL=DEBUG
