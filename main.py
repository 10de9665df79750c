# main.py

"""Streamlit web UI for the language filter.

Provides a simple interface to paste text, pick a vocabulary list and
redaction style, and see what the filter flags and how it sanitizes.
"""

import streamlit as st
import logging

from language_filter import Category, Filter, LanguageFilterError, ReplacementPolicy
from language_filter.core.loader import ListLoader
from language_filter.logging_config import configure_logging
from language_filter.service.config import settings

configure_logging(settings.log_level, settings.filter_log_level)

logger = logging.getLogger(__name__)


def main():
    """Run the Streamlit application UI.

    This function configures the Streamlit page, accepts input text and
    filter options from the user, runs the filter, and displays the matched
    words next to the sanitized text.
    """
    st.set_page_config(layout="wide", page_title="Language Filter", page_icon="🧼")

    st.title("Language Filter")
    st.markdown(
        "Flag and redact profanity, hate speech, sexual and violent language, "
        "including leetspeak spellings."
    )
    st.markdown("---")

    loader = ListLoader.get_instance()

    with st.sidebar:
        st.header("Options")
        categories = [c for c in Category if c is not Category.DEFAULT]
        category = st.selectbox(
            "Vocabulary",
            categories,
            index=categories.index(loader.default_category()),
            format_func=lambda c: c.value,
        )
        st.caption(loader.get_description(category))
        policies = [p for p in ReplacementPolicy if p is not ReplacementPolicy.DEFAULT]
        replacement = st.selectbox(
            "Replacement",
            policies,
            index=policies.index(settings.replacement)
            if settings.replacement in policies
            else policies.index(ReplacementPolicy.GARBLED),
            format_func=lambda p: p.value,
        )
        creative_letters = st.checkbox(
            "Creative letters", value=settings.creative_letters
        )
        exceptions_raw = st.text_area(
            "Exceptions (one per line)", height=150, placeholder="classic\nassassin"
        )

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Input Text")
        text_input = st.text_area(
            "Source Text", height=400, placeholder="Paste text here..."
        )

    with col2:
        st.subheader("Sanitized Output")

        if st.button("Filter", type="primary"):
            if not text_input or not text_input.strip():
                st.warning("Please enter text to process.")
                logger.warning("Filtering attempted with empty input")

            else:
                exceptions = [
                    line.strip() for line in exceptions_raw.splitlines() if line.strip()
                ]
                try:
                    language_filter = Filter(
                        matchlist=category,
                        exceptionlist=exceptions or None,
                        replacement=replacement,
                        creative_letters=creative_letters,
                    )
                    words = language_filter.matched(text_input)
                    sanitized = language_filter.sanitize(text_input)

                    st.text_area("Sanitized Text", value=sanitized, height=400)

                    if words:
                        st.error(f"Found {len(words)} flagged words: {', '.join(words)}")
                    else:
                        st.success("No flagged language found.")

                    logger.info(
                        f"Filtering complete: {len(words)} words flagged",
                        extra={"text_length": len(text_input), "category": category.value},
                    )

                except LanguageFilterError as e:
                    st.error(f"Filter configuration error: {e}")
                    logger.error(
                        "Filter rejected configuration",
                        exc_info=True,
                        extra={"error_type": type(e).__name__},
                    )


if __name__ == "__main__":
    main()
