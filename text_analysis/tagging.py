"""
tagging.py

This module provides the tagging engine used for manual qualitative coding.
The engine owns the label vocabulary (the "codes") and the per-document
label assignments, and is the only sanctioned way to mutate either.

Dependencies:
    - pandas
    - dataclasses for the immutable Document record

Classes:
    - Document: One unit of text under analysis, identified by its 1-based position.

    - TaggingEngine: Label vocabulary + assignment table with idempotent
      add_label / apply_label operations and a stable tabular export.
"""

import logging
import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

import pandas as pd

from text_analysis.config import LABEL_DELIMITER
from text_analysis.exceptions import InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)

LABELS_COLUMN = "labels"
TEXT_COLUMN = "text"


@dataclass(frozen=True)
class Document:
    """
    A document loaded from an ingestion event.

    Attributes:
        index: Stable 1-based position in the loaded collection.
        text: The text under analysis.
        extra_fields: The original source row (all columns, in order), if any.
    """

    index: int
    text: str
    extra_fields: Dict[str, Any] = field(default_factory=dict)


class TaggingEngine:
    """
    Owns the label vocabulary and the per-document assignment table.

    Every mutating operation validates its input first and only then updates
    state, so a rejected call never leaves a partial mutation behind.

    Example:
    -------
    >>> engine = TaggingEngine()
    >>> engine.reset([Document(1, "a"), Document(2, "b")])
    >>> engine.add_label("urgent")
    ['urgent']
    >>> engine.apply_label(2, "urgent")
    ['urgent']
    """

    def __init__(self) -> None:
        self._labels: List[str] = []
        self._documents: Tuple[Document, ...] = ()
        self._assignments: Dict[int, List[str]] = {}

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def labels(self) -> List[str]:
        """The label vocabulary in insertion order (a copy)."""
        return list(self._labels)

    @property
    def documents(self) -> Tuple[Document, ...]:
        return self._documents

    @property
    def document_count(self) -> int:
        return len(self._documents)

    def labels_for(self, document_id: int) -> List[str]:
        """Returns a copy of the labels applied to ``document_id``."""
        self._check_document(document_id)
        return list(self._assignments[int(document_id)])

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add_label(self, name: str) -> List[str]:
        """
        Adds a label to the vocabulary.

        Parameters:
        ----------
        name : str
            The label name. The caller is expected to have trimmed it already;
            an empty or blank name is still rejected here.

        Returns:
        -------
        List[str]
            The updated vocabulary, in insertion order.

        Raises:
        ------
        InvalidInputError
            If `name` is not a string or is empty/blank.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidInputError("Label name must be a non-empty string.")

        if name in self._labels:
            logger.debug("Label %r already defined", name)
        else:
            self._labels.append(name)
            logger.info("Added label %r (%d labels)", name, len(self._labels))

        return self.labels

    def apply_label(self, document_id: int, label_name: str) -> List[str]:
        """
        Applies a label to a document.

        Applying a label that is already present on the document is a no-op.
        Labels are kept in the order they were applied.

        Parameters:
        ----------
        document_id : int
            1-based document identifier.
        label_name : str
            A label already present in the vocabulary.

        Returns:
        -------
        List[str]
            The updated label list for the document.

        Raises:
        ------
        NotFoundError
            If the document identifier is outside ``[1, N]`` or the label is
            not in the vocabulary.
        """
        self._check_document(document_id)
        if label_name not in self._labels:
            raise NotFoundError(f"Unknown label: {label_name!r}")

        applied = self._assignments[int(document_id)]
        if label_name not in applied:
            applied.append(label_name)
            logger.debug("Applied %r to document %d", label_name, document_id)

        return list(applied)

    def reset(self, documents: Sequence[Document]) -> None:
        """
        Replaces the document set and clears every assignment.

        The label vocabulary is left untouched: codes persist across
        ingestion events.

        Parameters:
        ----------
        documents : Sequence[Document]
            The newly ingested documents, indexed ``1..N`` in order.

        Raises:
        ------
        InvalidInputError
            If the documents are not indexed ``1..N`` in order.
        """
        documents = tuple(documents)
        for position, document in enumerate(documents, start=1):
            if not isinstance(document, Document) or document.index != position:
                raise InvalidInputError(
                    f"Documents must be indexed 1..N in order (position {position})."
                )

        self._documents = documents
        self._assignments = {document.index: [] for document in documents}
        logger.info(
            "Loaded %d documents (%d labels kept)", len(documents), len(self._labels)
        )

    # ------------------------------------------------------------------
    # Export and display
    # ------------------------------------------------------------------
    def serialize_assignments(self) -> pd.DataFrame:
        """
        Builds the export table: one row per document.

        Columns are the original document fields (plus ``text`` when some
        documents carry no source row) followed by a single ``labels`` column
        holding the applied
        labels joined by a comma in application order. Unlabelled documents get
        an empty string.

        Returns:
        -------
        pd.DataFrame
            The export table, in document order.
        """
        columns = self._original_columns()
        rows = []
        for document in self._documents:
            row = {col: document.extra_fields.get(col) for col in columns}
            if TEXT_COLUMN not in document.extra_fields:
                row[TEXT_COLUMN] = document.text
            row[LABELS_COLUMN] = self._joined(document.index)
            rows.append(row)

        # object dtype keeps source values as given (no int -> float upcast)
        return pd.DataFrame(rows, columns=columns + [LABELS_COLUMN], dtype=object)

    def display_rows(self) -> pd.DataFrame:
        """Rows of ``(document_id, text, labels)`` for tabular display."""
        return pd.DataFrame(
            [
                {
                    "document_id": document.index,
                    TEXT_COLUMN: document.text,
                    LABELS_COLUMN: self._joined(document.index),
                }
                for document in self._documents
            ],
            columns=["document_id", TEXT_COLUMN, LABELS_COLUMN],
        )

    def label_counts(self) -> pd.Series:
        """Number of documents carrying each label, in vocabulary order."""
        counts = {label: 0 for label in self._labels}
        for applied in self._assignments.values():
            for label in applied:
                counts[label] += 1
        return pd.Series(counts, index=self._labels, dtype="int64", name="documents")

    def documents_with_label(self, label_name: str) -> List[Document]:
        """Documents the given label has been applied to, in document order."""
        if label_name not in self._labels:
            raise NotFoundError(f"Unknown label: {label_name!r}")
        return [
            document
            for document in self._documents
            if label_name in self._assignments[document.index]
        ]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _check_document(self, document_id: Any) -> None:
        if (
            isinstance(document_id, bool)
            or not isinstance(document_id, numbers.Integral)
            or not 1 <= document_id <= len(self._documents)
        ):
            raise NotFoundError(f"Unknown document: {document_id!r}")

    def _joined(self, document_id: int) -> str:
        return LABEL_DELIMITER.join(self._assignments[document_id])

    def _original_columns(self) -> List[str]:
        columns: List[str] = []
        for document in self._documents:
            for col in document.extra_fields:
                if col not in columns and col != LABELS_COLUMN:
                    columns.append(col)
        # documents without a source row still export their text
        if TEXT_COLUMN not in columns and (
            not columns or any(not d.extra_fields for d in self._documents)
        ):
            columns.append(TEXT_COLUMN)
        return columns
